"""
Modelo de dominio: Roles de los separadores de un monto.

En "1,234.56" el punto es el separador decimal y la coma el de miles.
En "1.234,56" es al revés. Este modelo guarda cuál es cuál después de
que `infer_separator_roles` analiza el texto limpio.
"""

from dataclasses import dataclass

SEPARADORES_VALIDOS: tuple[str, ...] = (".", ",")


@dataclass(frozen=True)
class SeparatorRoles:
    """Qué carácter es decimal y cuál es de miles (cualquiera puede faltar)."""

    decimal: str | None = None
    """Separador decimal: '.', ',' o None si el monto no tiene decimales."""

    thousands: str | None = None
    """Separador de miles: '.', ',' o None si no hay agrupación."""

    @property
    def tiene_decimal(self) -> bool:
        return self.decimal is not None

    def __post_init__(self) -> None:
        for rol, valor in (("decimal", self.decimal), ("thousands", self.thousands)):
            if valor is not None and valor not in SEPARADORES_VALIDOS:
                raise ValueError(f"Separador {rol} inválido: {valor!r}")
        if self.decimal is not None and self.decimal == self.thousands:
            raise ValueError(
                f"El mismo carácter no puede ser decimal y de miles: {self.decimal!r}"
            )

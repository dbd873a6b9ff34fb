"""
Modelo de dominio: Resultado de normalizar un monto.

Es el objeto que fluye por toda la arquitectura:
- Lo PRODUCE `normalize` (dominio).
- Lo CONSUME el OutputWriter (Excel) y el nodo de workflow.
- Lo REGISTRA el ProcessLogger.

Un resultado es éxito (trae `minor_units`) o fallo (trae `error_kind` y
`message`), nunca ambos. Así el camino de error queda explícito en el tipo
en lugar de depender de try/except.
"""

from dataclasses import dataclass
from enum import Enum

from src.domain.exceptions import (
    EmptyInputError,
    InvalidCharactersError,
    MissingFieldError,
    MoneyParserError,
)


class ErrorKind(Enum):
    """Tipos de error posibles. El valor es el nombre del contrato externo."""

    EMPTY_INPUT = "EmptyInput"
    INVALID_CHARACTERS = "InvalidCharacters"
    MISSING_FIELD = "MissingField"


@dataclass(frozen=True)
class ResultadoMonto:
    """Resultado de normalizar un texto monetario a unidades menores."""

    texto_original: object
    """Entrada tal como llegó. Puede no ser str (en ese caso es un fallo)."""

    minor_units: int | None = None
    """Monto con signo en unidades menores (centavos). None si falló."""

    error_kind: ErrorKind | None = None
    """Tipo de error. None si el monto se normalizó correctamente."""

    message: str | None = None
    """Mensaje legible del error, incluye el texto original."""

    @classmethod
    def success(cls, texto_original: object, minor_units: int) -> "ResultadoMonto":
        return cls(texto_original=texto_original, minor_units=minor_units)

    @classmethod
    def failure(
        cls, texto_original: object, error_kind: ErrorKind, message: str
    ) -> "ResultadoMonto":
        return cls(texto_original=texto_original, error_kind=error_kind, message=message)

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    def unwrap(self) -> int:
        """Devuelve `minor_units` o lanza la excepción que corresponde al error.

        Ejemplos:
            >>> ResultadoMonto.success("$1.00", 100).unwrap()
            100
        """
        if self.minor_units is not None:
            return self.minor_units
        raise self.to_exception()

    def to_exception(self) -> MoneyParserError:
        """Convierte un resultado fallido en su excepción de dominio."""
        if self.ok:
            raise ValueError("Un resultado exitoso no tiene excepción asociada")
        mensaje = self.message or ""
        if self.error_kind is ErrorKind.EMPTY_INPUT:
            return EmptyInputError(mensaje)
        if self.error_kind is ErrorKind.MISSING_FIELD:
            return MissingFieldError("Answers.Budget", mensaje)
        return InvalidCharactersError(str(self.texto_original), mensaje)

    def to_dict(self) -> dict:
        """Forma del contrato externo.

        Éxito:  {"ok": True, "minorUnits": 123456}
        Fallo:  {"ok": False, "errorKind": "EmptyInput", "message": "..."}
        """
        if self.error_kind is None:
            return {"ok": True, "minorUnits": self.minor_units}
        return {"ok": False, "errorKind": self.error_kind.value, "message": self.message}

    def __post_init__(self) -> None:
        if self.error_kind is None and self.minor_units is None:
            raise ValueError("Un resultado exitoso requiere minor_units")
        if self.error_kind is not None and self.minor_units is not None:
            raise ValueError(
                f"Un resultado fallido no puede traer minor_units: {self.minor_units}"
            )
        if isinstance(self.minor_units, bool):
            raise ValueError("minor_units debe ser int, no bool")

"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout con un
formato consistente y un resumen final.

Útil para:
- Desarrollo y debugging.
- Ejecución manual desde terminal.
"""

from pathlib import Path

from src.domain.models.resultado_monto import ResultadoMonto
from src.domain.ports.process_logger import ProcessLogger
from src.domain.shared.money import format_minor_units, format_money


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self, verbose: bool = True) -> None:
        self._verbose = verbose
        self._montos_recibidos: int = 0
        self._montos_validos: int = 0
        self._total_minor_units: int = 0
        self._errores: list[dict] = []

    def _print(self, mensaje: str) -> None:
        if self._verbose:
            print(mensaje)

    def log_amount_received(self, texto: object) -> None:
        self._montos_recibidos += 1

    def log_amount_parsed(self, resultado: ResultadoMonto) -> None:
        minor_units = resultado.unwrap()
        self._montos_validos += 1
        self._total_minor_units += minor_units
        self._print(
            f"  ✅ {resultado.texto_original!r} → {minor_units} "
            f"({format_minor_units(minor_units)})"
        )

    def log_amount_rejected(self, resultado: ResultadoMonto) -> None:
        tipo = resultado.error_kind.value if resultado.error_kind else ""
        self._errores.append(
            {
                "monto": str(resultado.texto_original),
                "tipo": tipo,
                "error": resultado.message or "",
            }
        )
        self._print(f"  ❌ {resultado.texto_original!r} — {tipo}: {resultado.message}")

    def log_output_written(self, output_path: Path) -> None:
        self._print(f"  📁 Archivo generado: {output_path}")

    def get_summary(self) -> dict:
        return {
            "montos_recibidos": self._montos_recibidos,
            "montos_validos": self._montos_validos,
            "montos_rechazados": len(self._errores),
            "total_minor_units": self._total_minor_units,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        print("\n" + "=" * 60)
        print("RESUMEN DE PROCESAMIENTO")
        print("=" * 60)
        print(f"  Montos recibidos:   {self._montos_recibidos}")
        print(f"  Montos válidos:     {self._montos_validos}")
        print(f"  Montos rechazados:  {len(self._errores)}")
        print(f"  Suma de válidos:    {format_money(self._total_minor_units)}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['monto']!r}: {err['error']}")

        print("=" * 60)

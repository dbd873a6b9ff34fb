"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos mientras se normalizan montos.

El dominio solo conoce los EVENTOS de negocio:
- "Se recibió un monto"
- "El monto se normalizó a N centavos"
- "El monto fue rechazado (EmptyInput / InvalidCharacters)"

La implementación decide el CÓMO (consola, archivo, memoria en tests).
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.resultado_monto import ResultadoMonto


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    @abstractmethod
    def log_amount_received(self, texto: object) -> None:
        """Registra que llegó un monto para normalizar."""
        ...

    @abstractmethod
    def log_amount_parsed(self, resultado: ResultadoMonto) -> None:
        """Registra un monto normalizado con éxito."""
        ...

    @abstractmethod
    def log_amount_rejected(self, resultado: ResultadoMonto) -> None:
        """Registra un monto rechazado.

        Args:
            resultado: ResultadoMonto fallido (trae error_kind y message).
        """
        ...

    @abstractmethod
    def log_output_written(self, output_path: Path) -> None:
        """Registra que se generó un archivo de salida."""
        ...

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'montos_recibidos': int,
                'montos_validos': int,
                'montos_rechazados': int,
                'total_minor_units': int,   # suma de los válidos
                'errores': List[dict],      # [{monto, tipo, error}]
            }
        """
        ...

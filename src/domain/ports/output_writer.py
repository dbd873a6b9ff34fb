"""
Puerto de salida: Escritor de resultados.

Define el contrato para escribir los montos normalizados en algún formato
persistente. El dominio solo produce ResultadoMonto; no conoce el formato.
Hoy es Excel.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from src.domain.models.resultado_monto import ResultadoMonto


class OutputWriter(ABC):
    """Interfaz para escribir resultados de normalización."""

    @abstractmethod
    def write_batch(self, resultados: Sequence[ResultadoMonto], output_path: Path) -> Path:
        """Escribe un lote de resultados (válidos y rechazados).

        Args:
            resultados: Resultados en el orden en que llegaron los montos.
            output_path: Ruta donde crear el archivo de salida.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura o no hay resultados.
        """
        ...

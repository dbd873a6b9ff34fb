"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from src.domain.ports import OutputWriter, ProcessLogger
"""

from src.domain.ports.output_writer import OutputWriter
from src.domain.ports.process_logger import ProcessLogger

__all__ = [
    "OutputWriter",
    "ProcessLogger",
]

"""
Servicio de dominio: Procesador de montos.

Orquesta la normalización de uno o varios montos:
1. Registra que llegó el monto (ProcessLogger).
2. Normaliza (`normalize`, función pura).
3. Registra el éxito o el rechazo.

El CLI solo decide DE DÓNDE vienen los montos (argumentos, archivo, demo)
y DÓNDE se guardan los resultados.
"""

from collections.abc import Iterable

from src.domain.models.resultado_monto import ResultadoMonto
from src.domain.ports.process_logger import ProcessLogger
from src.domain.shared.money import normalize


class AmountProcessor:
    """Normaliza montos y reporta cada evento a la bitácora.

    Recibe el logger por constructor (Dependency Injection). Nunca lanza
    excepción por un monto inválido: el rechazo viaja en el ResultadoMonto.
    """

    def __init__(self, logger: ProcessLogger) -> None:
        self._logger = logger

    def process(self, texto: object) -> ResultadoMonto:
        """Normaliza un monto y registra el resultado."""
        self._logger.log_amount_received(texto)
        resultado = normalize(texto)
        if resultado.ok:
            self._logger.log_amount_parsed(resultado)
        else:
            self._logger.log_amount_rejected(resultado)
        return resultado

    def process_batch(self, textos: Iterable[object]) -> list[ResultadoMonto]:
        """Normaliza todos los montos, en el mismo orden en que llegan."""
        return [self.process(texto) for texto in textos]

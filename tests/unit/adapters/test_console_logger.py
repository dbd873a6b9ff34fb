"""
Tests para ConsoleLogger: contadores del resumen y líneas impresas.
"""

from pathlib import Path

import pytest

from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.domain.exceptions import InvalidCharactersError
from src.domain.shared.money import normalize


def _registrar(logger: ConsoleLogger, texto: object) -> None:
    logger.log_amount_received(texto)
    resultado = normalize(texto)
    if resultado.ok:
        logger.log_amount_parsed(resultado)
    else:
        logger.log_amount_rejected(resultado)


class TestConsoleLogger:
    """Pruebas para ConsoleLogger."""

    def test_resumen_cuenta_validos_y_rechazados(self):
        logger = ConsoleLogger(verbose=False)
        for texto in ["$1,234.56", "€1.234,56", "", "PAGO NOMINA"]:
            _registrar(logger, texto)

        resumen = logger.get_summary()
        assert resumen["montos_recibidos"] == 4
        assert resumen["montos_validos"] == 2
        assert resumen["montos_rechazados"] == 2
        assert resumen["total_minor_units"] == 246912
        assert [e["tipo"] for e in resumen["errores"]] == ["EmptyInput", "InvalidCharacters"]

    def test_imprime_exito(self, capsys):
        logger = ConsoleLogger()
        _registrar(logger, "$(500.25)")
        salida = capsys.readouterr().out
        assert "✅" in salida
        assert "-50025" in salida
        assert "-500.25" in salida

    def test_imprime_rechazo(self, capsys):
        logger = ConsoleLogger()
        _registrar(logger, "abc!")
        salida = capsys.readouterr().out
        assert "❌" in salida
        assert "InvalidCharacters" in salida

    def test_resultado_fallido_como_valido_lanza_error(self):
        logger = ConsoleLogger(verbose=False)
        with pytest.raises(InvalidCharactersError):
            logger.log_amount_parsed(normalize("PAGO NOMINA"))
        assert logger.get_summary()["montos_validos"] == 0

    def test_silencioso_no_imprime(self, capsys):
        logger = ConsoleLogger(verbose=False)
        _registrar(logger, "$5")
        logger.log_output_written(Path("x.xlsx"))
        assert capsys.readouterr().out == ""

    def test_print_summary(self, capsys):
        logger = ConsoleLogger(verbose=False)
        _registrar(logger, "$1,234.56")
        _registrar(logger, "   ")
        logger.print_summary()
        salida = capsys.readouterr().out
        assert "RESUMEN DE PROCESAMIENTO" in salida
        assert "$1,234.56" in salida
        assert "ERRORES" in salida

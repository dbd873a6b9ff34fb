"""
Tests para src.domain.shared.money

Cada caso de prueba viene de un formato real de monto:
- "$1,234.56"     → EE.UU. (coma miles, punto decimal)
- "€1.234,56"     → Europa (punto miles, coma decimal)
- "₹1,23,456.78"  → India (agrupación lakh)
- "$(500.25)"     → notación contable para negativos
- "USD 1,000.50"  → código ISO en vez de símbolo
"""

import pytest

from src.domain.exceptions import EmptyInputError, InvalidCharactersError, MoneyParserError
from src.domain.models.resultado_monto import ErrorKind
from src.domain.shared.money import (
    format_minor_units,
    format_money,
    normalize,
    parse_money,
    round_decimal_part,
)


class TestNormalize:
    """Pruebas para normalize (devuelve ResultadoMonto, nunca lanza)."""

    # --- Escenarios de punta a punta ---

    @pytest.mark.parametrize(
        "texto, esperado",
        [
            ("$1,234.56", 123456),
            ("€1.234,56", 123456),
            ("£1,000", 100000),
            ("£1,000.00", 100000),
            ("¥1,234", 123400),
            ("$5.99", 599),
            ("€100", 10000),
            ("1234.56", 123456),
            ("₹1,23,456.78", 12345678),
            ("$-500.25", -50025),
            ("$(500.25)", -50025),
            ("USD 1,000.50", 100050),
            ("50 EUR", 5000),
            ("$0.99", 99),
            ("£10,000,000.00", 1000000000),
            ("€1.234.567,89", 123456789),
            ("$1234", 123400),
        ],
    )
    def test_muestras_conocidas(self, texto, esperado):
        resultado = normalize(texto)
        assert resultado.ok
        assert resultado.minor_units == esperado

    def test_simetria_us_eu(self):
        assert normalize("$1,234.56").minor_units == normalize("€1.234,56").minor_units

    # --- Símbolos y códigos ---

    def test_codigo_en_minusculas(self):
        assert normalize("usd 12.50").minor_units == 1250

    def test_codigo_pegado(self):
        assert normalize("EUR1.234,56").minor_units == 123456

    def test_simbolo_al_final(self):
        assert normalize("1.234,56 €").minor_units == 123456

    def test_simbolo_multicaracter(self):
        assert normalize("R$ 1.234,56").minor_units == 123456

    def test_signo_antes_del_simbolo(self):
        assert normalize("-$5.00").minor_units == -500

    def test_parentesis_antes_del_simbolo(self):
        assert normalize("($5.00)").minor_units == -500

    def test_codigo_que_empieza_con_letra_de_simbolo(self):
        """"R" es símbolo (rand), pero en "RUB" se quita el código completo."""
        assert normalize("RUB 100").minor_units == 10000

    # --- Espacios ---

    def test_espacios_alrededor(self):
        assert normalize("  $1,234.56  ").minor_units == 123456

    def test_espacio_como_separador_de_miles(self):
        assert normalize("1 234,56").minor_units == 123456

    def test_espacio_no_separable(self):
        assert normalize("1\u00a0234,56").minor_units == 123456

    # --- Signo ---

    @pytest.mark.parametrize("texto", ["$1,234.56", "1.234,56", "99", "0.50"])
    def test_guion_invierte_el_signo(self, texto):
        assert normalize("-" + texto).minor_units == -normalize(texto).minor_units

    def test_parentesis_igual_a_guion(self):
        assert normalize("$(500.25)").minor_units == normalize("$-500.25").minor_units

    def test_cero_negativo_es_cero(self):
        assert normalize("-0.00").minor_units == 0

    @pytest.mark.parametrize(
        "texto, esperado",
        [
            ("12.50-", -1250),
            ("1.234,56-", -123456),
            ("$500.25-", -50025),
            ("1,234-", -123400),
        ],
    )
    def test_guion_al_final(self, texto, esperado):
        assert normalize(texto).minor_units == esperado

    # --- Separadores ambiguos ---

    def test_un_solo_separador_con_un_digito_es_miles(self):
        """Ambiguo: se trata como miles y sin centavos."""
        assert normalize("1,5").minor_units == 1500

    def test_un_solo_separador_con_cuatro_digitos_es_miles(self):
        assert normalize("1,2345").minor_units == 1234500

    def test_varios_puntos_son_miles(self):
        assert normalize("1.234.567").minor_units == 123456700

    def test_decimal_vacio(self):
        assert normalize("1.234,").minor_units == 123400

    def test_sin_parte_entera(self):
        assert normalize(".50").minor_units == 50

    @pytest.mark.parametrize("texto", ["$", "EUR"])
    def test_solo_moneda_es_cero(self, texto):
        assert normalize(texto).minor_units == 0

    # --- Redondeo ---

    def test_redondeo_hacia_arriba(self):
        assert normalize("1,000.567").minor_units == 100057

    def test_redondeo_hacia_abajo(self):
        assert normalize("1,000.561").minor_units == 100056

    def test_redondeo_desborda_a_la_parte_entera(self):
        assert normalize("1,009.995").minor_units == 101000

    def test_redondeo_solo_mira_el_tercer_digito(self):
        """"0149": el 4 decide (hacia abajo); el 9 se ignora."""
        assert normalize("1.000,0149").minor_units == 100001

    # --- Errores ---

    @pytest.mark.parametrize("texto", ["", "   ", "\t\n"])
    def test_vacio(self, texto):
        resultado = normalize(texto)
        assert not resultado.ok
        assert resultado.error_kind is ErrorKind.EMPTY_INPUT
        assert resultado.minor_units is None

    @pytest.mark.parametrize("texto", [None, 123, 12.5, b"$1"])
    def test_no_string_es_vacio(self, texto):
        resultado = normalize(texto)
        assert resultado.error_kind is ErrorKind.EMPTY_INPUT
        assert "Se esperaba texto" in resultado.message
        assert type(texto).__name__ in resultado.message
        assert "vacío" not in resultado.message

    @pytest.mark.parametrize(
        "texto",
        ["PAGO NOMINA", "12 dólares", "$1,234.5x", "1e5", "²5", "#100"],
    )
    def test_caracteres_invalidos(self, texto):
        resultado = normalize(texto)
        assert resultado.error_kind is ErrorKind.INVALID_CHARACTERS
        assert texto in resultado.message
        assert resultado.minor_units is None

    def test_error_en_parte_decimal(self):
        resultado = normalize("1,234.5x")
        assert resultado.error_kind is ErrorKind.INVALID_CHARACTERS
        assert "decimal" in resultado.message

    def test_guarda_texto_original(self):
        assert normalize(" $5 ").texto_original == " $5 "


class TestParseMoney:
    """Pruebas para parse_money (versión estricta, lanza excepciones)."""

    def test_monto_valido(self):
        assert parse_money("$1,234.56") == 123456

    def test_devuelve_int(self):
        assert type(parse_money("€1.234,56")) is int

    def test_vacio_lanza_error(self):
        with pytest.raises(EmptyInputError, match="vacío"):
            parse_money("   ")

    def test_none_lanza_error_de_vacio(self):
        with pytest.raises(EmptyInputError):
            parse_money(None)

    def test_texto_invalido_lanza_error(self):
        with pytest.raises(InvalidCharactersError) as exc_info:
            parse_money("PAGO NOMINA")
        assert exc_info.value.texto == "PAGO NOMINA"

    def test_errores_heredan_de_la_base(self):
        with pytest.raises(MoneyParserError):
            parse_money("xyz!")


class TestRoundDecimalPart:
    """Pruebas para round_decimal_part (siempre 2 dígitos)."""

    @pytest.mark.parametrize(
        "entero, decimal, esperado",
        [
            ("1", "", ("1", "00")),
            ("1", "5", ("1", "50")),
            ("1", "05", ("1", "05")),
            ("1", "567", ("1", "57")),
            ("1", "561", ("1", "56")),
            ("1", "565", ("1", "57")),
            ("1", "0149", ("1", "01")),
            ("1", "045", ("1", "05")),
            ("9", "995", ("10", "00")),
            ("99", "999", ("100", "00")),
            ("0", "995", ("1", "00")),
            ("1099", "999", ("1100", "00")),
        ],
    )
    def test_casos(self, entero, decimal, esperado):
        assert round_decimal_part(entero, decimal) == esperado


class TestFormatMinorUnits:
    """Pruebas para format_minor_units (entero → "entero.centavos")."""

    @pytest.mark.parametrize(
        "minor_units, esperado",
        [
            (123456, "1234.56"),
            (-50025, "-500.25"),
            (0, "0.00"),
            (5, "0.05"),
            (-5, "-0.05"),
            (100000, "1000.00"),
        ],
    )
    def test_casos(self, minor_units, esperado):
        assert format_minor_units(minor_units) == esperado


class TestFormatMoney:
    """Pruebas para format_money (con separador de miles y símbolo)."""

    def test_formato_basico(self):
        assert format_money(123456) == "$1,234.56"

    def test_formato_grande(self):
        assert format_money(123456789) == "$1,234,567.89"

    def test_formato_cero(self):
        assert format_money(0) == "$0.00"

    def test_formato_negativo(self):
        assert format_money(-123456) == "-$1,234.56"

    def test_otro_simbolo(self):
        assert format_money(100000, symbol="€") == "€1,000.00"


class TestMontosMuyLargos:
    """Montos con más dígitos que el límite de conversión de int(str)."""

    def test_entero_largo(self):
        resultado = normalize("1" * 5000)
        assert resultado.minor_units == (10**5000 - 1) // 9 * 100

    def test_tres_decimales_tras_punto_unico_son_miles(self):
        resultado = normalize("9" * 5000 + ".999")
        assert resultado.minor_units == (10**5003 - 1) * 100

    def test_redondeo_que_desborda_a_la_parte_entera(self):
        resultado = normalize("1," + "9" * 4999 + ".995")
        assert resultado.minor_units == 2 * 10**5001

    def test_parse_money_no_lanza(self):
        assert parse_money("-" + "5" * 4500) < 0

    def test_formato(self):
        texto = format_minor_units(normalize("1" * 5000).minor_units)
        assert texto == "1" * 5000 + ".00"

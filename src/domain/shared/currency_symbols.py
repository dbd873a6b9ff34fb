"""
Tabla unificada de símbolos y códigos de moneda.

CONTEXTO DEL PROBLEMA:
Los montos llegan de formularios, hojas de cálculo y correos con el
símbolo pegado al número ("$1,234.56", "€1.234,56", "R$ 10,00") o con el
código ISO antes o después ("USD 1,000.50", "50 EUR"). Antes de decidir
qué separador es el decimal hay que quitar todo eso.

SOLUCIÓN:
- Un solo catálogo de símbolos, que se compila a una regex.
- Los símbolos alfabéticos ("R", "kr", "Rs") solo se reconocen si no van
  pegados a otra letra: así "RUB 100" no pierde la "R" y el código completo
  se quita después.
- Los códigos son cualquier palabra de 3 letras al inicio o al final
  (case-insensitive). No se valida contra ISO 4217.

Lo que no esté aquí se queda en el texto y el normalizador lo rechaza
después como InvalidCharacters.
"""

import re

# Símbolos de un solo carácter (no alfabéticos).
_SIMBOLOS_UN_CARACTER: str = (
    "$€£¥₹₽₱₩₪₴₦₨₵₲₸₺₼₾₿¢฿₡₢₣₤₥₧₫₭₮₯₰₳₶₷₻﷼"
    # Formas de ancho completo / compatibilidad
    "﹩＄￠￡￥￦"
)

# Símbolos de varios caracteres que incluyen "$".
_SIMBOLOS_DOLAR: tuple[str, ...] = (
    "US$",
    "R$",
    "C$",
    "A$",
    "NZ$",
    "HK$",
    "S$",
    "MX$",
)

# Símbolos formados solo por letras. Requieren que no les siga (o preceda,
# al final del texto) otra letra.
_SIMBOLOS_ALFABETICOS: tuple[str, ...] = (
    "kr",
    "Kr",
    "zł",
    "Kč",
    "Rs",
    "Rp",
    "Fr",
    "R",
)

CURRENCY_SYMBOLS: frozenset[str] = frozenset(
    set(_SIMBOLOS_UN_CARACTER) | set(_SIMBOLOS_DOLAR) | set(_SIMBOLOS_ALFABETICOS)
)

_LETRA = r"[^\W\d_]"


def _alternativas(al_final: bool) -> str:
    """Arma la alternancia de símbolos, los más largos primero."""
    partes: list[str] = []
    for simbolo in sorted(CURRENCY_SYMBOLS, key=len, reverse=True):
        escapado = re.escape(simbolo)
        if simbolo in _SIMBOLOS_ALFABETICOS:
            if al_final:
                escapado = rf"(?<!{_LETRA}){escapado}"
            else:
                escapado = rf"{escapado}(?!{_LETRA})"
        partes.append(escapado)
    return "|".join(partes)


# El signo escrito antes del símbolo ("-$5", "($5)") se conserva.
_RE_SIMBOLO_INICIAL = re.compile(rf"^(?P<signo>[-(]?)\s*(?:{_alternativas(al_final=False)})")
_RE_SIMBOLO_FINAL = re.compile(rf"\s*(?:{_alternativas(al_final=True)})$")

_RE_CODIGO_INICIAL = re.compile(r"^[A-Z]{3}\s*", re.IGNORECASE)
_RE_CODIGO_FINAL = re.compile(r"\s*[A-Z]{3}$", re.IGNORECASE)


def strip_currency_symbol(text: str) -> str:
    """Quita un símbolo de moneda al inicio y otro al final del texto.

    Ejemplos:
        >>> strip_currency_symbol("$1,234.56")
        '1,234.56'
        >>> strip_currency_symbol("-$5.00")
        '-5.00'
        >>> strip_currency_symbol("1.234,56 €")
        '1.234,56'
        >>> strip_currency_symbol("RUB 100")
        'RUB 100'
    """
    sin_inicial = _RE_SIMBOLO_INICIAL.sub(lambda m: m.group("signo"), text, count=1)
    return _RE_SIMBOLO_FINAL.sub("", sin_inicial, count=1)


def strip_currency_code(text: str) -> str:
    """Quita un código de 3 letras al inicio y otro al final.

    Ejemplos:
        >>> strip_currency_code("USD 1,000.50")
        '1,000.50'
        >>> strip_currency_code("50 eur")
        '50'
    """
    sin_inicial = _RE_CODIGO_INICIAL.sub("", text, count=1)
    return _RE_CODIGO_FINAL.sub("", sin_inicial, count=1)

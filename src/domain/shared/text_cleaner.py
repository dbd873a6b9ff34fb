"""
Utilidades de limpieza de texto para montos.

Funciones reutilizables que preparan el texto crudo antes de que el
normalizador decida qué separador es el decimal.

Estas funciones NO saben de separadores ni de redondeo. Solo operan
sobre strings puros.
"""

import re

from src.domain.shared.currency_symbols import strip_currency_code, strip_currency_symbol

_RE_ESPACIOS = re.compile(r"\s+")
_RE_MARCAS_SIGNO = re.compile(r"[-()]")
_RE_SOLO_DIGITOS = re.compile(r"[0-9]*")

SIGNO_MENOS = "-"
MARCAS_NEGATIVO: tuple[str, ...] = (SIGNO_MENOS, "(")


def clean_amount_text(text: str) -> str:
    """Quita símbolo, código de moneda y espacios exteriores.

    El resultado es el "texto limpio": dígitos, separadores, signo y
    paréntesis. Si queda otra cosa, la validación posterior lo rechaza.

    Ejemplos:
        >>> clean_amount_text("  $ 1,234.56 ")
        '1,234.56'
        >>> clean_amount_text("USD 1,000.50")
        '1,000.50'
        >>> clean_amount_text("12 ¤")
        '12 ¤'
    """
    sin_simbolo = strip_currency_symbol(text.strip()).strip()
    return strip_currency_code(sin_simbolo).strip()


def remove_whitespace(text: str) -> str:
    """Elimina todos los espacios (incluye tabs y espacios no separables).

    Ejemplos:
        >>> remove_whitespace("1 234")
        '1234'
        >>> remove_whitespace("5\\u00a00")
        '50'
    """
    return _RE_ESPACIOS.sub("", text)


def is_negative(text: str) -> bool:
    """True si el texto trae guion o paréntesis de notación contable."""
    return any(marca in text for marca in MARCAS_NEGATIVO)


def remove_sign_markers(text: str) -> str:
    """Quita '-', '(' y ')' del texto."""
    return _RE_MARCAS_SIGNO.sub("", text)


def is_digits(text: str) -> bool:
    """True si el texto es vacío o solo tiene dígitos ASCII 0-9.

    "²" y "١٢٣" NO cuentan como dígitos (aunque `str.isdigit()` diga que sí).
    """
    return _RE_SOLO_DIGITOS.fullmatch(text) is not None

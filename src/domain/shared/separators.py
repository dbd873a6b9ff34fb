"""
Inferencia de separadores decimal / miles.

El mismo monto se escribe "1,234.56" en EE.UU. y "1.234,56" en Europa.
No recibimos locale, así que se decide por la forma del texto:

1. Aparecen "." y ",": el que esté más a la derecha es el decimal.
2. Solo aparece uno, UNA vez:
   - seguido de 2 dígitos  → decimal   ("1234.56", "1234,56")
   - seguido de 3 dígitos  → miles     ("1.234", "1,234")
   - cualquier otra cuenta → miles, sin decimales ("1,2345")
3. Solo aparece uno, VARIAS veces → miles ("1,234,567", "1,23,456").
4. No aparece ninguno → no hay separadores.
"""

import re

from src.domain.models.separator_roles import SeparatorRoles
from src.domain.shared.text_cleaner import remove_whitespace

PUNTO = "."
COMA = ","

DIGITOS_DECIMALES = 2

_RE_DIGITOS_INICIALES = re.compile(r"[0-9]*")


def count_trailing_digits(text: str, index: int) -> int:
    """Cuenta los dígitos que siguen al carácter en `index`.

    Se ignoran espacios (OCR: "1234 . 5 6") y se corta en el primer
    carácter que no sea dígito, así el ")" de "(500.25)" no cuenta.

    Ejemplos:
        >>> count_trailing_digits("1,234", 1)
        3
        >>> count_trailing_digits("(500.25)", 4)
        2
    """
    cola = remove_whitespace(text[index + 1 :])
    return len(_RE_DIGITOS_INICIALES.match(cola).group())


def infer_separator_roles(text: str) -> SeparatorRoles:
    """Decide qué carácter es el separador decimal y cuál el de miles.

    Args:
        text: Texto limpio (sin símbolo ni código de moneda).

    Returns:
        SeparatorRoles. Nunca asigna el mismo carácter a ambos roles.

    Ejemplos:
        >>> infer_separator_roles("1,234.56")
        SeparatorRoles(decimal='.', thousands=',')
        >>> infer_separator_roles("1.234,56")
        SeparatorRoles(decimal=',', thousands='.')
        >>> infer_separator_roles("1,000")
        SeparatorRoles(decimal=None, thousands=',')
        >>> infer_separator_roles("5.99")
        SeparatorRoles(decimal='.', thousands=None)
    """
    ultimo_punto = text.rfind(PUNTO)
    ultima_coma = text.rfind(COMA)

    if ultimo_punto != -1 and ultima_coma != -1:
        if ultimo_punto > ultima_coma:
            return SeparatorRoles(decimal=PUNTO, thousands=COMA)
        return SeparatorRoles(decimal=COMA, thousands=PUNTO)

    if ultimo_punto == -1 and ultima_coma == -1:
        return SeparatorRoles()

    separador, indice = (PUNTO, ultimo_punto) if ultimo_punto != -1 else (COMA, ultima_coma)

    if text.count(separador) == 1:
        if count_trailing_digits(text, indice) == DIGITOS_DECIMALES:
            return SeparatorRoles(decimal=separador)
        # 3 dígitos es agrupación de miles; otra cantidad es ambigua y se
        # trata igual (sin parte decimal).
        return SeparatorRoles(thousands=separador)

    return SeparatorRoles(thousands=separador)


def split_amount(text: str, roles: SeparatorRoles) -> tuple[str, str]:
    """Separa el texto en (parte_entera, parte_decimal).

    Se corta en la PRIMERA aparición del separador decimal; si el separador
    vuelve a aparecer a la derecha, se elimina y los dígitos se juntan.
    Sin separador decimal, la parte decimal es "00".
    El separador de miles se elimina solo de la parte entera.

    Ejemplos:
        >>> split_amount("1,234.56", SeparatorRoles(decimal=".", thousands=","))
        ('1234', '56')
        >>> split_amount("1,000", SeparatorRoles(thousands=","))
        ('1000', '00')
    """
    if roles.tiene_decimal and roles.decimal in text:
        entero, _, resto = text.partition(roles.decimal)
        decimal = resto.replace(roles.decimal, "")
    else:
        entero, decimal = text, "00"

    if roles.thousands is not None:
        entero = entero.replace(roles.thousands, "")

    return entero, decimal

"""
Normalización de montos monetarios a unidades menores (centavos).

CONTEXTO DEL PROBLEMA:
Los montos llegan como texto libre y sin locale: "$1,234.56", "€1.234,56",
"£1,000", "USD 1,000.50", "$(500.25)". El mismo carácter puede ser
separador decimal en un texto y de miles en otro.

SOLUCIÓN:
Una sola función, `normalize`, que:
1. Quita símbolo y código de moneda (currency_symbols).
2. Decide qué separador es el decimal (separators).
3. Arma el entero en centavos, con redondeo a 2 decimales.
4. Devuelve un ResultadoMonto (éxito o fallo tipado), nunca float.

`parse_money` es la variante estricta: devuelve int o lanza
EmptyInputError / InvalidCharactersError.

Fuera de alcance: decimales por moneda (el yen también se multiplica
por 100) y locales explícitos.
"""

from decimal import Decimal

from src.domain.models.resultado_monto import ErrorKind, ResultadoMonto
from src.domain.shared.separators import DIGITOS_DECIMALES, infer_separator_roles, split_amount
from src.domain.shared.text_cleaner import (
    SIGNO_MENOS,
    clean_amount_text,
    is_digits,
    is_negative,
    remove_sign_markers,
    remove_whitespace,
)

CENTAVOS_POR_UNIDAD = 100
DIGITO_REDONDEO_MINIMO = 5


def normalize(text: object) -> ResultadoMonto:
    """Convierte un texto monetario a un entero con signo en unidades menores.

    Args:
        text: Texto que representa un monto. Cualquier otro tipo es un fallo
              EmptyInput.

    Returns:
        ResultadoMonto con `minor_units` si se pudo normalizar, o con
        `error_kind` EmptyInput / InvalidCharacters y un mensaje que incluye
        el texto original.

    Ejemplos:
        >>> normalize("$1,234.56").minor_units
        123456
        >>> normalize("€1.234,56").minor_units
        123456
        >>> normalize("$(500.25)").minor_units
        -50025
        >>> normalize("   ").error_kind
        <ErrorKind.EMPTY_INPUT: 'EmptyInput'>
    """
    if not isinstance(text, str):
        return ResultadoMonto.failure(
            text,
            ErrorKind.EMPTY_INPUT,
            f"Se esperaba texto para el monto, se recibió {type(text).__name__}",
        )
    if not text.strip():
        return ResultadoMonto.failure(
            text, ErrorKind.EMPTY_INPUT, "El texto del monto está vacío"
        )

    # Paso 1: Quitar símbolo y código de moneda
    limpio = clean_amount_text(text)

    # Paso 2-4: Roles de separadores, corte y eliminación de miles
    roles = infer_separator_roles(limpio)
    entero, decimal = split_amount(limpio, roles)

    # Paso 5: Espacios internos ("1 234,56")
    entero = remove_whitespace(entero)
    decimal = remove_whitespace(decimal)

    # Paso 6: Signo. "-" o "(" en la parte entera = negativo, igual que un
    # "-" al final de la parte decimal ("12.50-").
    negativo = is_negative(entero)
    entero = remove_sign_markers(entero)
    decimal = decimal.replace(")", "")
    if decimal.endswith(SIGNO_MENOS):
        negativo = True
        decimal = decimal[: -len(SIGNO_MENOS)]

    # Paso 7: Solo dígitos a partir de aquí
    if not is_digits(entero):
        return ResultadoMonto.failure(
            text,
            ErrorKind.INVALID_CHARACTERS,
            f"Caracteres inválidos en la parte entera: '{text}'",
        )
    if not is_digits(decimal):
        return ResultadoMonto.failure(
            text,
            ErrorKind.INVALID_CHARACTERS,
            f"Caracteres inválidos en la parte decimal: '{text}'",
        )

    # Paso 8-9: Completar y redondear
    entero, decimal = round_decimal_part(entero or "0", decimal)

    # Paso 10: "1234" + "56" → 123456. Decimal no tiene el límite de
    # dígitos de int(str).
    magnitud = int(Decimal(entero + decimal))
    return ResultadoMonto.success(text, -magnitud if negativo else magnitud)


def parse_money(text: object) -> int:
    """Versión estricta de `normalize`: devuelve int o lanza excepción.

    Raises:
        EmptyInputError: Si el texto está vacío o no es str.
        InvalidCharactersError: Si quedan caracteres que no son dígitos.
                                El mensaje incluye el valor original.

    Ejemplos:
        >>> parse_money("£1,000")
        100000
        >>> parse_money("50 EUR")
        5000
    """
    return normalize(text).unwrap()


def round_decimal_part(entero: str, decimal: str) -> tuple[str, str]:
    """Deja la parte decimal en exactamente 2 dígitos.

    - Vacía      → "00"
    - 1 dígito   → se completa con "0" a la derecha ("5" → "50")
    - 3 o más    → se toman 2 y se redondea hacia arriba si el TERCER
                   dígito es >= 5. Los dígitos posteriores se ignoran
                   ("0149" → "01", no "02").
    - Si el redondeo llega a 100, la parte decimal vuelve a "00" y la
      parte entera sube en 1 ("9" + "995" → "10" + "00").

    Args:
        entero: Parte entera, solo dígitos y no vacía.
        decimal: Parte decimal, solo dígitos (puede ser vacía).

    Returns:
        Tupla (entero, decimal) con decimal de 2 dígitos.

    Ejemplos:
        >>> round_decimal_part("1", "567")
        ('1', '57')
        >>> round_decimal_part("1", "561")
        ('1', '56')
        >>> round_decimal_part("9", "995")
        ('10', '00')
    """
    if not decimal:
        return entero, "00"

    if len(decimal) <= DIGITOS_DECIMALES:
        return entero, decimal.ljust(DIGITOS_DECIMALES, "0")

    # TODO: redondear con el valor completo de la cola ("0149" → "01" hoy);
    # se mantiene la regla de un solo dígito por compatibilidad.
    base = int(decimal[:DIGITOS_DECIMALES])
    if int(decimal[DIGITOS_DECIMALES]) >= DIGITO_REDONDEO_MINIMO:
        base += 1

    if base >= CENTAVOS_POR_UNIDAD:
        return _incrementar(entero), "00"

    return entero, f"{base:02d}"


def _incrementar(entero: str) -> str:
    """Suma 1 a una cadena de dígitos sin pasar por int ("199" → "200")."""
    sin_nueves = entero.rstrip("9")
    ceros = "0" * (len(entero) - len(sin_nueves))
    if not sin_nueves:
        return "1" + ceros
    return sin_nueves[:-1] + str(int(sin_nueves[-1]) + 1) + ceros


def format_minor_units(minor_units: int) -> str:
    """Representa unidades menores como "entero.centavos".

    Ejemplos:
        >>> format_minor_units(123456)
        '1234.56'
        >>> format_minor_units(-50025)
        '-500.25'
        >>> format_minor_units(5)
        '0.05'
    """
    signo = "-" if minor_units < 0 else ""
    absoluto = abs(minor_units)
    unidades, centavos = divmod(absoluto, CENTAVOS_POR_UNIDAD)
    return f"{signo}{Decimal(unidades)}.{centavos:02d}"


def format_money(minor_units: int, symbol: str = "$") -> str:
    """Formatea unidades menores como string monetario legible.

    Útil para logging y para el resumen del CLI.

    Ejemplos:
        >>> format_money(123456789)
        '$1,234,567.89'
        >>> format_money(0)
        '$0.00'
        >>> format_money(-50025)
        '-$500.25'
    """
    signo = "-" if minor_units < 0 else ""
    absoluto = abs(minor_units)
    unidades, centavos = divmod(absoluto, CENTAVOS_POR_UNIDAD)
    return f"{signo}{symbol}{Decimal(unidades):,}.{centavos:02d}"

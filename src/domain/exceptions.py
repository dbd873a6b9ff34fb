"""
Excepciones de dominio del proyecto money-parser.

El normalizador (`normalize`) NO lanza excepciones: devuelve un
ResultadoMonto con el tipo de error. Estas excepciones son para el modo
estricto (`parse_money`, `ResultadoMonto.unwrap()`) y para los adaptadores
de salida, de forma que el CLI pueda capturar cualquier error del proyecto
con un solo `except MoneyParserError`.

Jerarquía:
    MoneyParserError
    ├── EmptyInputError          → Texto vacío o que no es str
    ├── InvalidCharactersError   → Quedaron caracteres que no son dígitos
    ├── MissingFieldError        → El registro del workflow no trae el campo
    └── OutputError              → Error al generar el archivo de salida
"""


class MoneyParserError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta."""


class EmptyInputError(MoneyParserError):
    """Se lanza cuando el monto está vacío, solo tiene espacios, o no es str."""

    def __init__(self, mensaje: str = "El texto del monto está vacío"):
        super().__init__(mensaje)


class InvalidCharactersError(MoneyParserError):
    """Se lanza cuando, después de limpiar símbolos, códigos, separadores y
    signo, quedan caracteres que no son dígitos.

    Ejemplos:
    - "PAGO NOMINA"   (texto sin monto)
    - "12 dólares"    (palabra no reconocida)
    - "$1,234.5x"     (basura de OCR en la parte decimal)
    """

    def __init__(self, texto: str, mensaje: str = ""):
        self.texto = texto
        super().__init__(mensaje or f"Caracteres inválidos en el monto: '{texto}'")


class MissingFieldError(MoneyParserError):
    """Se lanza cuando un registro del workflow no trae el campo del monto."""

    def __init__(self, campo: str, mensaje: str = ""):
        self.campo = campo
        super().__init__(mensaje or f"Falta el campo '{campo}' o está vacío")


class OutputError(MoneyParserError):
    """Se lanza cuando falla la generación del archivo de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - No hay resultados que escribir.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")

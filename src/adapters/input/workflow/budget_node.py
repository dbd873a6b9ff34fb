"""
Adaptador de entrada: Nodo de workflow para el presupuesto (N8N).

El workflow entrega un registro JSON con el presupuesto del formulario en
`Answers.Budget`. El nodo devuelve un registro NUEVO con los campos
originales más:

    budgetOriginal   → valor crudo del formulario (o None)
    budgetParsed     → unidades menores (None si falló)
    budgetFormatted  → "entero.centavos" (None si falló)
    parseError       → mensaje de error (None si tuvo éxito)

El registro de entrada nunca se modifica.
"""

from collections.abc import Iterable, Mapping

from src.domain.models.budget_record import BudgetRecord
from src.domain.models.resultado_monto import ErrorKind, ResultadoMonto
from src.domain.shared.money import format_minor_units, normalize

MENSAJE_CAMPO_FALTANTE = "Budget field is missing or empty"


def evaluate_budget(registro: BudgetRecord) -> ResultadoMonto:
    """Normaliza el presupuesto del registro.

    Si el campo falta, devuelve un fallo MissingField sin llamar a
    `normalize`.
    """
    if registro.falta_presupuesto:
        return ResultadoMonto.failure(
            registro.budget, ErrorKind.MISSING_FIELD, MENSAJE_CAMPO_FALTANTE
        )
    return normalize(registro.budget)


def transform_record(record: Mapping) -> dict:
    """Transforma un registro del workflow (función pura).

    Ejemplos:
        >>> transform_record({"Answers": {"Budget": "$1,500"}})["budgetParsed"]
        150000
        >>> transform_record({})["parseError"]
        'Budget field is missing or empty'
    """
    registro = BudgetRecord.from_record(record)
    resultado = evaluate_budget(registro)

    salida = dict(registro.datos)
    salida["budgetOriginal"] = registro.budget
    if resultado.minor_units is not None:
        salida["budgetParsed"] = resultado.minor_units
        salida["budgetFormatted"] = format_minor_units(resultado.minor_units)
        salida["parseError"] = None
    else:
        salida["budgetParsed"] = None
        salida["budgetFormatted"] = None
        salida["parseError"] = resultado.message
    return salida


def transform_records(records: Iterable[Mapping]) -> list[dict]:
    """Aplica `transform_record` a cada registro, en orden."""
    return [transform_record(record) for record in records]

"""
Modelos de dominio del proyecto money-parser.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from src.domain.models import ResultadoMonto, ErrorKind, SeparatorRoles
"""

from src.domain.models.budget_record import BudgetRecord
from src.domain.models.resultado_monto import ErrorKind, ResultadoMonto
from src.domain.models.separator_roles import SeparatorRoles

__all__ = [
    "BudgetRecord",
    "ErrorKind",
    "ResultadoMonto",
    "SeparatorRoles",
]

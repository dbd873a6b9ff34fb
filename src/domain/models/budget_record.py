"""
Modelo de dominio: Registro de entrada del nodo de workflow (N8N).

El formulario llega como un dict sin tipo, con el presupuesto anidado en
`Answers.Budget`. Este modelo da una vista tipada de ese registro: el
campo del presupuesto es opcional de forma explícita (`budget is None`)
en lugar de depender de accesos encadenados que devuelven None.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

CAMPO_RESPUESTAS = "Answers"
CAMPO_PRESUPUESTO = "Budget"


@dataclass(frozen=True)
class BudgetRecord:
    """Vista tipada de un registro de workflow con presupuesto opcional."""

    datos: dict = field(default_factory=dict)
    """Copia superficial del registro original (nunca se modifica el de entrada)."""

    budget: object | None = None
    """Valor crudo de `Answers.Budget`. None si el campo no viene."""

    @classmethod
    def from_record(cls, record: Mapping) -> "BudgetRecord":
        """Construye la vista a partir del registro crudo.

        Ejemplos:
            >>> BudgetRecord.from_record({"Answers": {"Budget": "$1,500"}}).budget
            '$1,500'
            >>> BudgetRecord.from_record({"Answers": None}).budget is None
            True
        """
        respuestas = record.get(CAMPO_RESPUESTAS)
        budget = None
        if isinstance(respuestas, Mapping):
            budget = respuestas.get(CAMPO_PRESUPUESTO)
        return cls(datos=dict(record), budget=budget)

    @property
    def falta_presupuesto(self) -> bool:
        """True si el campo no viene, es None o es cadena vacía."""
        return self.budget is None or self.budget == ""

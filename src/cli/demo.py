"""
Demo por lotes: normaliza una lista fija de montos de ejemplo.

Cubre los formatos que motivaron el normalizador: EE.UU., Europa, India,
negativos con guion y con paréntesis, y códigos ISO antes y después.
"""

import sys
from typing import TextIO

from src.domain.models.resultado_monto import ResultadoMonto
from src.domain.services.amount_processor import AmountProcessor

DEMO_SAMPLES: tuple[str, ...] = (
    "$1,234.56",
    "€1.234,56",
    "£1,000",
    "£1,000.00",
    "¥1,234",
    "$5.99",
    "€100",
    "1234.56",
    "₹1,23,456.78",
    "$-500.25",
    "$(500.25)",
    "USD 1,000.50",
    "50 EUR",
    "$0.99",
    "£10,000,000.00",
    "€1.234.567,89",
    "$1234",
)

ANCHO_ENTRADA = 20


def run_demo(
    processor: AmountProcessor,
    out: TextIO | None = None,
    samples: tuple[str, ...] = DEMO_SAMPLES,
) -> list[ResultadoMonto]:
    """Normaliza cada muestra e imprime "Entrada → Salida" o el error."""
    out = out if out is not None else sys.stdout

    print("Normalizador de montos", file=out)
    print("=" * 60, file=out)
    print("Convirtiendo montos a enteros (en centavos)\n", file=out)

    resultados = processor.process_batch(samples)
    for resultado in resultados:
        entrada = str(resultado.texto_original).ljust(ANCHO_ENTRADA)
        if resultado.ok:
            print(f"Entrada: {entrada} → Salida: {resultado.minor_units}", file=out)
        else:
            print(f"Entrada: {entrada} → Error: {resultado.message}", file=out)

    return resultados

"""
Adaptador de entrada: Lector interactivo de montos.

Lee un monto por línea de un stream de texto (normalmente stdin), lo
normaliza e imprime el valor en unidades menores y su equivalente
"entero.centavos". Termina cuando el stream se cierra (EOF / Ctrl+D).

Recibe los streams por parámetro para que los tests puedan usar StringIO.
"""

import sys
from typing import TextIO

from src.domain.shared.money import format_minor_units, normalize

PROMPT = "Monto: "


def run_interactive(
    stream: TextIO | None = None,
    out: TextIO | None = None,
    prompt: str = PROMPT,
) -> int:
    """Ciclo de lectura-normalización-impresión.

    Args:
        stream: De dónde leer. Por defecto sys.stdin.
        out: Dónde escribir. Por defecto sys.stdout.
        prompt: Texto que se muestra antes de cada lectura.

    Returns:
        Cantidad de montos que se normalizaron con éxito.
    """
    stream = stream if stream is not None else sys.stdin
    out = out if out is not None else sys.stdout

    print("Modo interactivo (Ctrl+D para salir)", file=out)
    print("Escribe montos para normalizar:\n", file=out)

    exitosos = 0
    out.write(prompt)
    out.flush()
    for linea in stream:
        texto = linea.strip()
        if texto:
            resultado = normalize(texto)
            if resultado.minor_units is not None:
                exitosos += 1
                print(
                    f"  → Valor:       {resultado.minor_units} (unidades menores/centavos)",
                    file=out,
                )
                print(
                    f"  → Equivalente: {format_minor_units(resultado.minor_units)}\n",
                    file=out,
                )
            else:
                print(f"  ✗ Error: {resultado.message}\n", file=out)
        out.write(prompt)
        out.flush()

    print("\n\n¡Hasta luego!", file=out)
    return exitosos

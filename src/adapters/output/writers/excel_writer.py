"""
Adaptador de salida: Escritor de Excel.

Genera archivos Excel con el layout estándar de 2 hojas:
- Hoja 1 (Resumen): Conteo de montos válidos / rechazados y la suma.
- Hoja 2 (Montos): Detalle de cada monto con 5 columnas.

Se usa xlsxwriter como motor de pandas.
"""

from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from src.domain.exceptions import OutputError
from src.domain.models.resultado_monto import ResultadoMonto
from src.domain.ports.output_writer import OutputWriter
from src.domain.shared.money import CENTAVOS_POR_UNIDAD, format_minor_units

HOJA_RESUMEN = "Resumen"
HOJA_MONTOS = "Montos"


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    def write_batch(self, resultados: Sequence[ResultadoMonto], output_path: Path) -> Path:
        """Escribe un lote de montos a Excel.

        Args:
            resultados: Resultados de normalización (válidos y rechazados).
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        if not resultados:
            raise OutputError(str(output_path), "No hay resultados para escribir")

        # Asegurar extensión .xlsx
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self._escribir_excel(resultados, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

    # =================================================================
    # MÉTODOS PRIVADOS: Generación del Excel
    # =================================================================

    @staticmethod
    def _filas_montos(resultados: Sequence[ResultadoMonto]) -> list[dict]:
        filas = []
        for resultado in resultados:
            filas.append(
                {
                    "Entrada": str(resultado.texto_original),
                    "Unidades menores": resultado.minor_units,
                    "Monto": (
                        resultado.minor_units / CENTAVOS_POR_UNIDAD
                        if resultado.ok
                        else None
                    ),
                    "Equivalente": (
                        format_minor_units(resultado.minor_units)
                        if resultado.minor_units is not None
                        else ""
                    ),
                    "Tipo de error": resultado.error_kind.value if resultado.error_kind else "",
                    "Error": resultado.message or "",
                }
            )
        return filas

    @staticmethod
    def _filas_resumen(resultados: Sequence[ResultadoMonto]) -> list[dict]:
        validos = [r for r in resultados if r.ok]
        total = sum(r.minor_units or 0 for r in validos)
        return [
            {
                "Montos recibidos": len(resultados),
                "Montos válidos": len(validos),
                "Montos rechazados": len(resultados) - len(validos),
                "Total unidades menores": total,
                "Total": format_minor_units(total),
            }
        ]

    def _escribir_excel(self, resultados: Sequence[ResultadoMonto], output_path: Path) -> None:
        """Genera el archivo Excel con las 2 hojas."""
        df_montos = pd.DataFrame(self._filas_montos(resultados))
        df_resumen = pd.DataFrame(self._filas_resumen(resultados))

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            # Hoja 1: Resumen
            df_resumen.to_excel(writer, index=False, sheet_name=HOJA_RESUMEN)

            # Hoja 2: Montos
            df_montos.to_excel(writer, index=False, sheet_name=HOJA_MONTOS)

            # --- Aplicar formato ---
            workbook = writer.book
            ws_resumen = writer.sheets[HOJA_RESUMEN]
            ws_montos = writer.sheets[HOJA_MONTOS]

            # Texto: la entrada se guarda tal cual ("007", "1,000")
            text_format = workbook.add_format({"num_format": "@"})

            # Montos: 2 decimales con separador de miles
            money_format = workbook.add_format({"num_format": "#,##0.00"})

            # --- Formato Hoja Resumen ---
            ws_resumen.set_column("A:C", 18)  # Conteos
            ws_resumen.set_column("D:D", 22)  # Total unidades menores
            ws_resumen.set_column("E:E", 18, text_format)  # Total

            # --- Formato Hoja Montos ---
            ws_montos.set_column("A:A", 24, text_format)  # Entrada
            ws_montos.set_column("B:B", 18)  # Unidades menores
            ws_montos.set_column("C:C", 16, money_format)  # Monto
            ws_montos.set_column("D:D", 16, text_format)  # Equivalente
            ws_montos.set_column("E:E", 20)  # Tipo de error
            ws_montos.set_column("F:F", 60)  # Error

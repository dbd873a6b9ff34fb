"""
Punto de entrada CLI: money-parser.

Uso:
    # Normalizar montos sueltos
    money-parser parse '$1,234.56' '€1.234,56'

    # Montos que empiezan con guion van después de "--"
    money-parser parse -- -500.25

    # Un monto por línea desde un archivo, con salida a Excel
    money-parser batch montos.txt -o /ruta/salida/montos.xlsx

    # Demo con los ejemplos fijos (y luego modo interactivo)
    money-parser demo --interactive

    # Modo interactivo sobre stdin
    money-parser interactive

    # Nodo de workflow: registro(s) JSON desde archivo o stdin
    echo '{"Answers": {"Budget": "$1,500"}}' | money-parser workflow

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (ConsoleLogger, ExcelWriter).
- Las inyecta en el AmountProcessor.
- Ejecuta el subcomando.

No contiene lógica de negocio, solo "fontanería" (wiring).
"""

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from src.adapters.input.line_readers.interactive_reader import run_interactive
from src.adapters.input.workflow.budget_node import transform_record, transform_records
from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.adapters.output.writers.excel_writer import ExcelWriter
from src.cli.demo import run_demo
from src.domain.exceptions import MoneyParserError
from src.domain.models.resultado_monto import ResultadoMonto
from src.domain.services.amount_processor import AmountProcessor


def main(argv: Sequence[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)

    try:
        args.handler(args)
    except MoneyParserError as e:
        print(f"❌ {e}")
        sys.exit(1)


# =====================================================================
# SUBCOMANDOS
# =====================================================================


def _cmd_parse(args: argparse.Namespace) -> None:
    if args.json:
        # Una línea JSON por monto, sin bitácora (salida para otras herramientas)
        processor = AmountProcessor(ConsoleLogger(verbose=False))
        resultados = processor.process_batch(args.valores)
        for resultado in resultados:
            print(json.dumps(resultado.to_dict(), ensure_ascii=False))
        _exit_if_rejected(resultados)
        return

    logger = ConsoleLogger()
    resultados = AmountProcessor(logger).process_batch(args.valores)
    _write_output(resultados, args.output, logger)
    logger.print_summary()
    _exit_if_rejected(resultados)


def _cmd_batch(args: argparse.Namespace) -> None:
    input_path = Path(args.archivo)
    if not input_path.is_file():
        print(f"❌ La ruta no existe: {input_path}")
        sys.exit(1)

    lineas = input_path.read_text(encoding="utf-8").splitlines()
    textos = [linea.strip() for linea in lineas if linea.strip()]

    print("=" * 60)
    print("NORMALIZADOR DE MONTOS")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Montos:   {len(textos)}")
    print()

    logger = ConsoleLogger()
    resultados = AmountProcessor(logger).process_batch(textos)
    _write_output(resultados, args.output, logger)
    logger.print_summary()
    _exit_if_rejected(resultados)


def _cmd_demo(args: argparse.Namespace) -> None:
    # Las líneas de la demo ya muestran cada resultado
    logger = ConsoleLogger(verbose=False)
    resultados = run_demo(AmountProcessor(logger))
    _write_output(resultados, args.output, logger)
    logger.print_summary()

    if args.interactive:
        print()
        run_interactive()


def _cmd_interactive(args: argparse.Namespace) -> None:
    run_interactive()


def _cmd_workflow(args: argparse.Namespace) -> None:
    if args.archivo:
        input_path = Path(args.archivo)
        if not input_path.is_file():
            print(f"❌ La ruta no existe: {input_path}")
            sys.exit(1)
        raw = input_path.read_text(encoding="utf-8")
    else:
        raw = sys.stdin.read()

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        print(f"❌ JSON inválido: {e}")
        sys.exit(1)

    if isinstance(data, dict):
        salida: object = transform_record(data)
    elif isinstance(data, list) and all(isinstance(item, dict) for item in data):
        salida = transform_records(data)
    else:
        print("❌ Se esperaba un objeto JSON o una lista de objetos")
        sys.exit(1)

    print(json.dumps(salida, ensure_ascii=False, indent=2))


# =====================================================================
# AUXILIARES
# =====================================================================


def _write_output(
    resultados: list[ResultadoMonto], output: str | None, logger: ConsoleLogger
) -> None:
    """Escribe el Excel si se pidió -o. Propaga OutputError."""
    if not output:
        return
    output_path = ExcelWriter().write_batch(resultados, Path(output))
    logger.log_output_written(output_path)
    print(f"\n📁 Excel generado: {output_path}")


def _exit_if_rejected(resultados: list[ResultadoMonto]) -> None:
    if any(not r.ok for r in resultados):
        sys.exit(1)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="money-parser",
        description="Normaliza montos monetarios en texto libre a unidades menores (centavos)",
        epilog="Ejemplo: money-parser parse '$1,234.56' '€1.234,56'",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_parse = subparsers.add_parser("parse", help="Normaliza los montos indicados")
    p_parse.add_argument("valores", nargs="+", help="Montos a normalizar")
    _add_output_argument(p_parse)
    p_parse.add_argument(
        "--json",
        action="store_true",
        help="Imprime una línea JSON por monto ({ok, minorUnits | errorKind, message})",
    )
    p_parse.set_defaults(handler=_cmd_parse)

    p_batch = subparsers.add_parser("batch", help="Normaliza un monto por línea de un archivo")
    p_batch.add_argument("archivo", help="Archivo de texto UTF-8, un monto por línea")
    _add_output_argument(p_batch)
    p_batch.set_defaults(handler=_cmd_batch)

    p_demo = subparsers.add_parser("demo", help="Normaliza los montos de ejemplo")
    _add_output_argument(p_demo)
    p_demo.add_argument(
        "--interactive",
        action="store_true",
        help="Al terminar la demo, continúa en modo interactivo",
    )
    p_demo.set_defaults(handler=_cmd_demo)

    p_interactive = subparsers.add_parser("interactive", help="Lee montos de stdin")
    p_interactive.set_defaults(handler=_cmd_interactive)

    p_workflow = subparsers.add_parser(
        "workflow", help="Procesa registro(s) JSON con Answers.Budget"
    )
    p_workflow.add_argument(
        "archivo",
        nargs="?",
        help="Archivo JSON. Si no se indica, se lee de stdin.",
    )
    p_workflow.set_defaults(handler=_cmd_workflow)

    return parser.parse_args(argv)


def _add_output_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-o",
        "--output",
        dest="output",
        help="Archivo Excel de salida con el detalle de los montos.",
    )


if __name__ == "__main__":
    main()

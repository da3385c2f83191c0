"""
CLI: точка входа калькулятора

    matrix-calc [filename] [--width W] [--dump-json] [-v]

Без filename путь запрашивается интерактивно. Коды выхода:
- 0: нормальное завершение (включая выбор 0 или EOF)
- 1: не задан файл или загрузка не удалась
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence, TextIO

from src.core.contracts import validate_matrix_store
from src.core.io.formatter import DEFAULT_CELL_WIDTH, format_matrix
from src.core.io.loader import LoadError
from src.session import MatrixSession, SessionConfig, SessionContext

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matrix-calc",
        description="Interactive calculator over two square integer matrices A and B",
    )
    parser.add_argument(
        "filename",
        nargs="?",
        help="Input file: N, then N*N integers for A, then N*N integers for B",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_CELL_WIDTH,
        help=f"Cell width for printed matrices (default: {DEFAULT_CELL_WIDTH})",
    )
    parser.add_argument(
        "--dump-json",
        action="store_true",
        help="Print the loaded matrices as a JSON snapshot and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Debug logging to stderr",
    )
    return parser


def _ask_filename(stdin: TextIO, stdout: TextIO) -> Optional[str]:
    stdout.write("Enter input filename: ")
    stdout.flush()
    line = stdin.readline().rstrip("\r\n")
    return line or None


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.width < 1:
        parser.error(f"--width must be positive, got {args.width}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    filename = args.filename or _ask_filename(stdin, stdout)
    if not filename:
        stdout.write("No filename.\n")
        return 1

    try:
        context = SessionContext.open(filename)
    except LoadError as e:
        stdout.write(f"{e}\n")
        return 1

    if args.dump_json:
        snapshot = context.store.to_contract()
        validate_matrix_store(snapshot)
        stdout.write(json.dumps(snapshot) + "\n")
        return 0

    config = SessionConfig(cell_width=args.width)
    stdout.write(f"Loaded from '{filename}'.\n")
    stdout.write(format_matrix(context.store.a, "Matrix A:", config.cell_width))
    stdout.write(format_matrix(context.store.b, "Matrix B:", config.cell_width))

    MatrixSession(context, config, stdin=stdin, stdout=stdout).run()
    logger.debug("Session for %s finished", filename)
    return 0


if __name__ == "__main__":
    sys.exit(main())

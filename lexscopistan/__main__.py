"""Command-line entry point: run both skopes and print the storage summary."""

import argparse
import logging
import sys

from .economy import run_economy
from .output.reports import export_document, export_workbook


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lexscopistan",
        description="Process the Lexscopistan field and gem mine into storage containers",
    )
    parser.add_argument("--json", type=str, default=None, help="Write the summary to a JSON file.")
    parser.add_argument("--xlsx", type=str, default=None, help="Write container sheets to an .xlsx workbook.")
    parser.add_argument("--docx", type=str, default=None, help="Write a summary Word document.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each container as it is sealed.")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run = run_economy()
    summary = run.summary()
    print(summary.render_text())

    if args.json:
        summary.export_json(args.json)
    if args.xlsx:
        export_workbook(run, args.xlsx)
    if args.docx:
        export_document(run, args.docx)

    return 0


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from babel.core import UnknownLocaleError

from shiftgrid.config import GridConfig, GridStyling
from shiftgrid.errors import MalformedInputError
from shiftgrid.grid.builder import DEFAULT_LOCALE, build_grid
from shiftgrid.io.csv_loader import load_roster_csv
from shiftgrid.io.excel_export import export_to_excel
from shiftgrid.io.frame import export_to_csv
from shiftgrid.io.json_loader import load_roster_json
from shiftgrid.io.pdf_export import export_to_pdf
from shiftgrid.utils.logging_setup import init_logging
from shiftgrid.utils.structured_logging import (
    bind_context,
    clear_context,
    configure_structlog,
    get_structured_logger,
)

FORMATS = ["html", "json", "csv", "xlsx", "pdf"]
BINARY_FORMATS = {"xlsx", "pdf"}

STYLE_FLAGS = {
    "table_class": "table",
    "thead_class": "thead",
    "tbody_class": "tbody",
    "date_header_class": "dateHeader",
    "row_header_class": "rowHeader",
    "cell_class": "cell",
}


def _build_styling(args: argparse.Namespace) -> GridStyling:
    styling: Dict[str, Any] = {}
    if args.styling:
        styling.update(json.loads(Path(args.styling).read_text(encoding="utf-8")))
    for flag, key in STYLE_FLAGS.items():
        value = getattr(args, flag)
        if value is not None:
            styling[key] = value
    return GridStyling.from_dict(styling)


def _build_config(args: argparse.Namespace) -> GridConfig:
    cfg: Dict[str, Any] = {"align": args.align, "reference_index": args.reference}
    if args.date_caption is not None:
        cfg["date_caption"] = args.date_caption
    return GridConfig.from_dict(cfg)


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="shiftgrid", description="Render a staff roster as a shift grid")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--json", dest="json_path", help="Roster payload (JSON, '-' for stdin)")
    src.add_argument("--csv", dest="csv_path", help="Roster in long CSV format")
    p.add_argument("--format", choices=FORMATS, default="html", help="Output format (default: html)")
    p.add_argument("-o", "--out", help="Output file (default: stdout for text formats)")
    p.add_argument("--locale", default=DEFAULT_LOCALE, help=f"Locale for month names (default: {DEFAULT_LOCALE})")
    p.add_argument("--align", choices=["date", "position"], default="date",
                   help="Match cells to columns by date or by position")
    p.add_argument("--reference", type=int, default=0, help="Staff entry defining the columns (default: 0)")
    p.add_argument("--date-caption", help="Corner caption of the date row")
    p.add_argument("--styling", help="JSON file with class names")
    for flag in STYLE_FLAGS:
        p.add_argument("--" + flag.replace("_", "-"), dest=flag)
    p.add_argument("--log-file", help="Also log to this file")
    p.add_argument("--log-json", action="store_true", help="Structured event log as JSON lines")
    p.add_argument("-v", "--verbose", action="count", default=0)
    return p


def _load(args: argparse.Namespace):
    if args.csv_path:
        return load_roster_csv(args.csv_path)
    if args.json_path == "-":
        return load_roster_json(sys.stdin)
    return load_roster_json(args.json_path)


def _write(grid, args: argparse.Namespace) -> None:
    fmt = args.format
    if fmt in BINARY_FORMATS:
        if not args.out:
            raise ValueError(f"--out is required for {fmt} output")
        if fmt == "xlsx":
            export_to_excel(grid, args.out)
        else:
            export_to_pdf(grid, args.out)
        return

    if fmt == "csv":
        if args.out:
            export_to_csv(grid, args.out)
        else:
            export_to_csv(grid, sys.stdout)
        return

    text = grid.to_html() if fmt == "html" else json.dumps(grid.to_dict(), ensure_ascii=False, indent=2)
    if args.out:
        Path(args.out).write_text(text + "\n", encoding="utf-8")
    else:
        sys.stdout.write(text + "\n")


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    level = ["WARNING", "INFO", "DEBUG", "TRACE"][min(args.verbose, 3)]
    init_logging(level=level, log_file=args.log_file)
    configure_structlog(json_output=args.log_json,
                        level=logging.INFO if args.verbose else logging.CRITICAL)
    log = get_structured_logger("shiftgrid.cli")

    bind_context(source=args.json_path or args.csv_path, format=args.format)
    try:
        roster = _load(args)
        grid = build_grid(roster, _build_styling(args), args.locale, _build_config(args))
        _write(grid, args)
    except MalformedInputError as e:
        log.error("malformed_roster", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 2
    except (ValueError, UnknownLocaleError) as e:
        log.error("invalid_options", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        clear_context()

    if args.verbose:
        log.info("grid_rendered", rows=len(grid.body), columns=len(grid.columns), out=args.out or "-")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Code wheel command-line interface."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from .config import DEFAULT_CONFIG, WheelConfig
from .io import load_config, load_symbols
from .logging_config import level_for, setup_logging
from .symbols import SymbolLookupError, SymbolTable, validate_codes
from .visibility import GeometryError, VisibilityResolver

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Code wheel CLI")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", dest="log_file")
    sub = parser.add_subparsers(dest="command", required=True)

    resolve = sub.add_parser("resolve", help="List the cells visible for given ring sections")
    resolve.add_argument("--outer", type=int, required=True)
    resolve.add_argument("--middle", type=int, required=True)
    resolve.add_argument("--symbols", dest="symbols_path")
    resolve.add_argument("--json", action="store_true", help="Print JSON instead of text")

    render = sub.add_parser("render", help="Render the wheel at given rotations to PNG")
    render.add_argument("--outer-angle", type=float, default=0.0)
    render.add_argument("--middle-angle", type=float, default=0.0)
    render.add_argument("--symbols", dest="symbols_path")
    render.add_argument("--config", dest="config_path")
    render.add_argument("--out", dest="output_path", required=True)
    render.add_argument("--debug", action="store_true", help="Draw section boundaries")
    render.add_argument("--settle", action="store_true", help="Snap rings before rendering")
    render.add_argument("--dpi", type=int, default=150)

    validate = sub.add_parser("validate", help="Validate a symbol table and/or config file")
    validate.add_argument("--symbols", dest="symbols_path")
    validate.add_argument("--config", dest="config_path")

    table = sub.add_parser("table", help="Report visibility over every section pair")
    table.add_argument("--out", dest="output_path", help="Write the report as JSON")

    view = sub.add_parser("view", help="Open the interactive viewer")
    view.add_argument("--symbols", dest="symbols_path")
    view.add_argument("--config", dest="config_path")
    view.add_argument("--debug", action="store_true")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level_for(args.verbose, getattr(args, "debug", False)), args.log_file)

    try:
        if args.command == "resolve":
            _cmd_resolve(args)
        elif args.command == "render":
            _cmd_render(args)
        elif args.command == "validate":
            _cmd_validate(args)
        elif args.command == "table":
            _cmd_table(args)
        elif args.command == "view":
            _cmd_view(args)
    except (GeometryError, SymbolLookupError, ValueError, KeyError, OSError) as exc:
        logger.error("%s", exc)
        print(exc)
        raise SystemExit(1)


def _symbols(path: Optional[str]) -> Optional[SymbolTable]:
    return load_symbols(path) if path else None


def _config(path: Optional[str], debug: bool = False) -> WheelConfig:
    config = load_config(path) if path else DEFAULT_CONFIG
    if debug and not config.debug:
        config = replace(config, debug=True)
    return config


def _cmd_resolve(args) -> None:
    from .wheel import CodeWheel

    wheel = CodeWheel(symbols=_symbols(args.symbols_path))
    result = wheel.resolver.resolve(args.outer, args.middle)
    if args.json:
        payload = {
            "outer": result.outer_section,
            "middle": result.middle_section,
            "cells": [{"index": c.index, "code": c.code} for c in result.cells],
        }
        print(json.dumps(payload))
        return
    for cell in result.cells:
        print(f"{cell.index:>3}  {cell.code}")


def _cmd_render(args) -> None:
    from .models import Ring
    from .render import render_png
    from .wheel import CodeWheel

    wheel = CodeWheel(
        symbols=_symbols(args.symbols_path),
        config=_config(args.config_path, debug=args.debug),
    )
    wheel.set_rotation(Ring.OUTER, args.outer_angle)
    wheel.set_rotation(Ring.MIDDLE, args.middle_angle)
    frame = wheel.settle() if args.settle else None
    render_png(wheel, args.output_path, frame=frame, show_debug=args.debug, dpi=args.dpi)
    print(f"Saved {args.output_path}")


def _cmd_validate(args) -> None:
    if not args.symbols_path and not args.config_path:
        raise ValueError("Nothing to validate: pass --symbols and/or --config")

    errors: list[str] = []
    if args.config_path:
        errors.extend(load_config(args.config_path).validate())
    if args.symbols_path:
        table = load_symbols(args.symbols_path)
        errors.extend(validate_codes(table))
        try:
            VisibilityResolver(table)
        except (GeometryError, SymbolLookupError) as exc:
            errors.append(str(exc))

    if errors:
        for error in errors:
            print(error)
        raise SystemExit(1)
    print("OK")


def _cmd_table(args) -> None:
    from .diagnostics import diagnostics_report

    report = diagnostics_report()
    text = json.dumps(report, indent=2)
    if args.output_path:
        Path(args.output_path).write_text(text, encoding="utf-8")
        print(f"Saved {args.output_path}")
    else:
        print(text)


def _cmd_view(args) -> None:
    from .viewer import WheelViewer
    from .wheel import CodeWheel

    wheel = CodeWheel(
        symbols=_symbols(args.symbols_path),
        config=_config(args.config_path, debug=args.debug),
    )
    WheelViewer(wheel).show()


if __name__ == "__main__":
    main()

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from iconforge.icons import service
from iconforge.icons.errors import IconForgeError, InvalidConfiguration, UnknownPreset
from iconforge.icons.presets import DEFAULT_PRESET, STYLE_PRESETS
from iconforge.icons.svg_checks import check_svg, summarize_report
from iconforge.logging_config import setup_logging


def _emit(obj: Any) -> None:
    sys.stdout.write(json.dumps(obj, indent=2, ensure_ascii=False) + "\n")


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SystemExit(f"Could not read {path}: {e}") from e


def _cmd_prompt(args: argparse.Namespace) -> int:
    raw = _load_json(args.config)
    if args.variants:
        _emit(service.generate_variants(raw))
    elif args.creative:
        _emit(service.generate_creative_prompt(raw))
    else:
        _emit(service.generate_prompt(raw))
    return 0


def _cmd_infer(args: argparse.Namespace) -> int:
    _emit(service.parse_input(args.text, args.preset))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    try:
        svg = args.svg.read_text(encoding="utf-8")
    except OSError as e:
        raise SystemExit(f"Could not read {args.svg}: {e}") from e
    rules = check_svg(svg)
    summary = summarize_report(rules)
    _emit({"validation": [r.to_payload() for r in rules], "summary": summary.to_payload()})
    return 0 if summary.compliant else 2


def _cmd_presets(args: argparse.Namespace) -> int:
    _emit(service.presets_catalog())
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="icon-forge", description="Build icon prompts and lint generated SVG.")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("prompt", help="Build a prompt from an icon config JSON file")
    p.add_argument("config", type=Path, help="Path to icon config JSON")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--creative", action="store_true", help="Append the creative personality block")
    mode.add_argument("--variants", action="store_true", help="Emit standard, detailed, creative and minimal prompts")
    p.set_defaults(func=_cmd_prompt)

    p = sub.add_parser("infer", help="Infer an icon config from keywords or a filename")
    p.add_argument("text", help="Keywords or filename, e.g. download-icon.svg")
    p.add_argument("--preset", default=DEFAULT_PRESET, help=f"One of: {', '.join(STYLE_PRESETS)} (default: {DEFAULT_PRESET})")
    p.set_defaults(func=_cmd_infer)

    p = sub.add_parser("check", help="Run the conformance checks against an SVG file (exit 2 on failures)")
    p.add_argument("svg", type=Path, help="Path to SVG file")
    p.set_defaults(func=_cmd_check)

    p = sub.add_parser("presets", help="List style presets")
    p.set_defaults(func=_cmd_presets)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(stream=sys.stderr)
    try:
        return int(args.func(args))
    except InvalidConfiguration as e:
        _emit({"error": e.error, "details": e.details})
    except UnknownPreset as e:
        _emit({"error": "Invalid preset", "availablePresets": e.available})
    except IconForgeError as e:
        _emit({"error": str(e)})
    return 1


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
# osrm/road/router.py
# -*- coding: utf-8 -*-

"""
Command line app: fastest route between two coordinates (lat, lon), in the
supplied order, using the public OSRM service.

Every flag has an English and a Spanish spelling.

Usage
-----
    osrm-route --color --lower --alternatives --steps --straight --overview \\
        --hints --timeout=9 --profile=bike --format=geojson \\
        --from_lat=42.666 --from_lon=10.55 --to_lat=15.42 --to_lon=12.75 "hint,hint,hint"

    osrm-route --color --minusculas --alternativas --pasos --derecho --resumen \\
        --sugerencias --timeout=9 --perfil=bici --formato=geojson \\
        --desde_lat=42.666 --desde_lon=10.55 --hasta_lat=15.42 --hasta_lon=12.75 "hint,hint,hint"

    osrm-route --log-level=INFO --log-file=logs/route.log ... "hint"

Exit codes
----------
0  success, --version, --license, --help
1  invalid profile, missing/malformed arguments, or any client error
"""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence

from osrm import __version__
from osrm.core.config import ClientConfig
from osrm.core.errors import OSRMError, ValidationError
from osrm.core.models import Coordinate, profile_from_text
from osrm.infra.logging import get_logger, init_logging, log_banner
from osrm.road.osrm_client import OSRMClient

_log = get_logger(__name__)

LICENSE = "MIT"

DESCRIPTION = """\
Finds the best fastest Route between 2 Coordinates (lat,lon) in supplied order
using the Open Source Routing Machine for OpenStreetMap API online services.

For Uglyfied JSON use --ugly (does not reduce bandwith usage).
If you dont have any Hints for the Query just use an empty string.

Para JSON Minificado afeado usar --fea (no reduce uso de ancho de banda).
Si no tenes ninguna Sugerencia (Hint) para la consulta usa un string vacio.
"""

# ANSI foreground colours for --color
_FOREGROUNDS = (31, 32, 33, 34, 35, 36, 37)
_BG_BLACK = 40
_RESET = "\x1b[0m"


# ────────────────────────────────────────────────────────────────────────────────
# Parser
# ────────────────────────────────────────────────────────────────────────────────

class _Parser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on bad input."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\nWrong Parameters, see Help with --help\n")


class _LicenseAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        parser.exit(0, LICENSE + "\n")


def _profile_type(value: str):
    try:
        return profile_from_text(value)
    except ValidationError:
        raise argparse.ArgumentTypeError(
            f"Wrong Parameters for Profile, see Help with --help: {value.strip().lower()}"
        ) from None


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
          prog="osrm-route"
        , description=DESCRIPTION
        , formatter_class=argparse.RawDescriptionHelpFormatter
        , add_help=False
    )

    # Meta
    parser.add_argument("-h", "--help", "--ayuda", action="help", help="Show this help and exit.")
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--license", "--licencia", action=_LicenseAction, help="Show the license and exit.")

    # Output formatting
    parser.add_argument("--color", action="store_true", help="Random terminal colour.")
    parser.add_argument("--lower", "--minusculas", dest="lower", action="store_true", help="Lower-case output.")
    parser.add_argument("--ugly", "--fea", dest="ugly", action="store_true", help="Compact JSON.")

    # Route options
    parser.add_argument("--alternatives", "--alternativas", dest="alternatives", action="store_true")
    parser.add_argument("--steps", "--pasos", "--pasitos", dest="steps", action="store_true")
    parser.add_argument("--straight", "--derecho", dest="straight", action="store_true")
    parser.add_argument("--overview", "--resumen", dest="overview", action="store_true")
    parser.add_argument(
          "--hints", "--sugerencias"
        , dest="generate_hints"
        , action="store_true"
        , help="Ask the service to generate hints."
    )
    parser.add_argument("--timeout", type=int, default=99, help="HTTP timeout in seconds (0~255). Default: 99")
    parser.add_argument(
          "--profile", "--perfil"
        , dest="profile"
        , type=_profile_type
        , default="car"
        , help="car|bike|foot|driving (or auto, bici, pie, manejando, ...). Default: car"
    )
    parser.add_argument(
          "--format", "--formato"
        , dest="geometries"
        , type=lambda s: s.strip().lower()
        , default="geojson"
        , help="polyline|polyline6|geojson. Default: geojson"
    )

    # Points
    parser.add_argument("--from_lat", "--desde_lat", dest="from_lat", type=float, required=True)
    parser.add_argument("--from_lon", "--desde_lon", dest="from_lon", type=float, required=True)
    parser.add_argument("--to_lat", "--hasta_lat", dest="to_lat", type=float, required=True)
    parser.add_argument("--to_lon", "--hasta_lon", dest="to_lon", type=float, required=True)

    parser.add_argument(
          "hints"
        , help='Comma-joined hints from a previous reply, or "" for none.'
    )

    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument(
          "--log-file", "--archivo-log"
        , dest="log_file"
        , type=Path
        , default=None
        , help="Also write log records to this file."
    )

    return parser


# ────────────────────────────────────────────────────────────────────────────────
# Presentation
# ────────────────────────────────────────────────────────────────────────────────

def split_hints(raw: str) -> List[str]:
    """"a,b,c" → ["a", "b", "c"]; blanks are dropped."""
    return [h.strip() for h in (raw or "").split(",") if h.strip()]


def render(doc: Any, *, ugly: bool = False, lower: bool = False) -> str:
    if ugly:
        text = json.dumps(doc, ensure_ascii=False, separators=(",", ":"))
    else:
        text = json.dumps(doc, ensure_ascii=False, indent=2)
    return text.lower() if lower else text


def colorize(text: str, rng: Optional[random.Random] = None) -> str:
    """Wrap `text` in a random ANSI foreground on a black background."""
    rng = rng or random.Random()
    fg = rng.choice(_FOREGROUNDS)
    return f"\x1b[{_BG_BLACK}m\x1b[{fg}m{text}{_RESET}"


# ────────────────────────────────────────────────────────────────────────────────
# Main
# ────────────────────────────────────────────────────────────────────────────────

def main(
    argv: Optional[Sequence[str]] = None
) -> int:
    args = _build_parser().parse_args(argv)

    log_path = init_logging(level=args.log_level, log_file=args.log_file)
    if log_path is not None:
        print(f"Log file: {log_path}", file=sys.stderr)
    log_banner(_log, f"osrm-route {__version__} profile={args.profile}", char="-")

    try:
        osrm = OSRMClient(cfg=ClientConfig(timeout=args.timeout))
        point_a = Coordinate(lat=args.from_lat, lon=args.from_lon)
        point_b = Coordinate(lat=args.to_lat, lon=args.to_lon)
        doc = osrm.route(
              profile=args.profile
            , coordinates=[point_a, point_b]
            , alternatives=args.alternatives
            , steps=args.steps
            , continue_straight=args.straight
            , overview=args.overview
            , geometries=args.geometries
            , generate_hints=args.generate_hints
            , hints=split_hints(args.hints)
        )
    except OSRMError as exc:
        _log.error("Route failed: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    text = render(doc, ugly=args.ugly, lower=args.lower)
    if args.color:
        text = colorize(text)
    print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

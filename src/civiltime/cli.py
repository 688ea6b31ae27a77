from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Type

from .civil import CIVIL_TYPE_BY_NAME, CIVIL_TYPES, CivilDay, CivilTime
from .config import get_settings
from .core.errors import CivilTimeError
from .core.log import configure_logging, get_logger
from .engines.weekday import Weekday

log = get_logger(__name__)

_ALIGNS = [cls.granularity.name for cls in CIVIL_TYPES]


def _civil_type(align: Optional[str], n_fields: int) -> Type[CivilTime]:
    """Explicit alignment, or the one implied by how many fields were given."""
    if align is not None:
        return CIVIL_TYPE_BY_NAME[align]
    return CIVIL_TYPES[6 - n_fields]


def _parse_fields(s: str) -> List[int]:
    """'2016,1,28' -> [2016, 1, 28]"""
    try:
        out = [int(p) for p in s.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma-separated integers, got '{s}'") from None
    if not 1 <= len(out) <= 6:
        raise argparse.ArgumentTypeError(f"expected 1 to 6 fields, got {len(out)}")
    return out


def _weekday(s: str) -> Weekday:
    try:
        return Weekday.parse(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _add_fields_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument("fields", nargs="+", type=int, metavar="FIELD", help="Y [M [D [HH [MM [SS]]]]]; use -- before negative values")
    p.add_argument("--align", choices=_ALIGNS, help="alignment (default: implied by the number of fields)")


def _build(fields: Sequence[int], align: Optional[str]) -> CivilTime:
    cls = _civil_type(align, len(fields))
    padded = list(fields) + [1, 1, 0, 0, 0][len(fields) - 1:]
    # Fields beyond the class's alignment are normalized, then dropped by align().
    return cls.from_civil(CIVIL_TYPES[0](*padded))


def cmd_normalize(args: argparse.Namespace) -> int:
    v = _build(args.fields, args.align)
    log.debug("normalize", fields=args.fields, align=args.align, result=str(v))
    print(v)
    return 0


def cmd_shift(args: argparse.Namespace) -> int:
    v = _build(args.fields, args.align)
    out = v + args.by if args.cmd == "add" else v - args.by
    log.debug(args.cmd, start=str(v), by=args.by, result=str(out))
    print(out)
    return 0


def cmd_diff(args: argparse.Namespace) -> int:
    align = args.align or CIVIL_TYPES[6 - max(len(args.a), len(args.b))].granularity.name
    a = _build(args.a, align)
    b = _build(args.b, align)
    n = a - b
    log.debug("diff", a=str(a), b=str(b), align=align, result=n)
    print(n)
    return 0


def cmd_weekday(args: argparse.Namespace) -> int:
    d = CivilDay(args.year, args.month, args.day)
    print(d.weekday().name.capitalize())
    return 0


def cmd_yearday(args: argparse.Namespace) -> int:
    d = CivilDay(args.year, args.month, args.day)
    print(d.yearday())
    return 0


def cmd_seek_weekday(args: argparse.Namespace) -> int:
    d = CivilDay(args.year, args.month, args.day)
    out = d.next_weekday(args.target) if args.cmd == "next-weekday" else d.prev_weekday(args.target)
    log.debug(args.cmd, start=str(d), target=args.target.name, result=str(out))
    print(out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="civiltime", description="Time-zone independent Gregorian civil-time calculator.")
    p.add_argument("--verbose", "-v", action="store_true", help="enable debug logging")
    p.add_argument("--log-json", action="store_true", help="render log lines as JSON")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_norm = sub.add_parser("normalize", help="Normalize possibly out-of-range fields")
    _add_fields_arg(p_norm)
    p_norm.set_defaults(func=cmd_normalize)

    for name, helptext in (("add", "Add N units of the alignment"), ("sub", "Subtract N units of the alignment")):
        p_shift = sub.add_parser(name, help=helptext)
        p_shift.add_argument("--by", type=int, required=True, help="number of units")
        _add_fields_arg(p_shift)
        p_shift.set_defaults(func=cmd_shift)

    p_diff = sub.add_parser("diff", help="Difference a - b in units of the alignment")
    p_diff.add_argument("a", type=_parse_fields, help="Y[,M[,D[,HH[,MM[,SS]]]]]; use -- before a negative year")
    p_diff.add_argument("b", type=_parse_fields, help="Y[,M[,D[,HH[,MM[,SS]]]]]; use -- before a negative year")
    p_diff.add_argument("--align", choices=_ALIGNS)
    p_diff.set_defaults(func=cmd_diff)

    for name, func, helptext in (
        ("weekday", cmd_weekday, "Day of week of a date"),
        ("yearday", cmd_yearday, "Day of year of a date"),
    ):
        p_day = sub.add_parser(name, help=helptext)
        p_day.add_argument("year", type=int)
        p_day.add_argument("month", type=int)
        p_day.add_argument("day", type=int)
        p_day.set_defaults(func=func)

    for name, helptext in (
        ("next-weekday", "First date strictly after the given one on a weekday"),
        ("prev-weekday", "Last date strictly before the given one on a weekday"),
    ):
        p_seek = sub.add_parser(name, help=helptext)
        p_seek.add_argument("year", type=int)
        p_seek.add_argument("month", type=int)
        p_seek.add_argument("day", type=int)
        p_seek.add_argument("target", type=_weekday, help="Mon, Tue, ... Sun")
        p_seek.set_defaults(func=cmd_seek_weekday)

    return p


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)
    if len(getattr(args, "fields", ())) > 6:
        parser.error("at most 6 fields (Y M D HH MM SS) are accepted")

    try:
        settings = get_settings()
    except CivilTimeError as e:
        print(f"civiltime: {e}", file=sys.stderr)
        return 2
    configure_logging(
        level=logging.DEBUG if args.verbose else settings.log_level,
        log_json=args.log_json or settings.log_json,
    )

    try:
        return args.func(args)
    except CivilTimeError as e:
        log.error("command_failed", cmd=args.cmd, error=str(e))
        print(f"civiltime: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

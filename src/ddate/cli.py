from __future__ import annotations

import argparse
from datetime import date
import sys
import importlib

from dateutil import parser as dtparser


_COMMANDS = ("day", "ordinal", "pretty-season", "holydays", "diag", "-h", "--help")


def _run_diagnostic(modpath: str, argv: list[str]) -> int:
    """Import a diagnostics module and run its main(argv)."""
    mod = importlib.import_module(modpath)
    return int(mod.main(argv) or 0)


def _print_attributes(info) -> None:
    for k, v in (info.attributes or {}).items():
        print(f"  {k}: {v}")


def cmd_day(argv: list[str]) -> int:
    import ddate

    p = argparse.ArgumentParser(prog="ddate day", description="Gregorian -> Discordian date")
    p.add_argument("date", nargs="?", default=None, help="Any date dateutil can parse (default: today)")
    p.add_argument("--plain", action="store_true", help="Do not print holyday celebrations")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    if args.date is None:
        d = date.today()
        prefix = "Today"
    else:
        try:
            d = dtparser.parse(args.date).date()
        except (ValueError, OverflowError):
            print("Could not parse provided date.")
            return 1
        prefix = d.isoformat()

    print(f"{prefix} is {ddate.to_poee(d, celebrate=not args.plain)}")
    if args.attr:
        _print_attributes(ddate.day_info(d, attributes=tuple(args.attr)))
    return 0


def cmd_ordinal(argv: list[str]) -> int:
    import ddate
    from ddate.core.time import iso_label

    p = argparse.ArgumentParser(
        prog="ddate ordinal",
        description="Convert a civil year and day-of-year (any year, including negative).",
    )
    p.add_argument("year", type=int)
    p.add_argument("day_of_year", type=int)
    p.add_argument("--plain", action="store_true", help="Do not print holyday celebrations")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    civil = ddate.CivilDate.of(args.year, args.day_of_year)
    try:
        poee = civil.to_poee(celebrate=not args.plain)
        info = ddate.day_info(civil, attributes=tuple(args.attr))
    except ddate.InvalidInputError as e:
        raise SystemExit(f"ddate: {e}")

    print(f"{iso_label(*civil.to_ymd())} is {poee}")
    _print_attributes(info)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Classic form: `ddate [DATE]`
    if not argv or argv[0] not in _COMMANDS:
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="ddate", description="Discordian calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Discordian date (default command)")
    sub.add_parser("ordinal", help="Civil year + day-of-year -> Discordian date")

    # diagnostics
    sub.add_parser("pretty-season", help="Print season calendars with civil dates (diagnostics)")
    sub.add_parser("holydays", help="Print holyday table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Plotting diagnostics (needs ddate[diagnostics])")
    p_diag.add_argument(
        "tool",
        choices=["year-strip"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "ordinal":
        return cmd_ordinal(rest)

    if args.cmd == "pretty-season":
        return _run_diagnostic("ddate.diagnostics.pretty_season", rest)

    if args.cmd == "holydays":
        return _run_diagnostic("ddate.diagnostics.holyday_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "year-strip": "ddate.diagnostics.year_strip",
        }
        return _run_diagnostic(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
"""
Catalog Analytics CLI — inspect a catalog file or start the API server.

USAGE:
  python -m catalog_analytics.cli summary                        # Headline numbers
  python -m catalog_analytics.cli summary --file titles.csv      # Another catalog file

  python -m catalog_analytics.cli list types                     # Distinct types
  python -m catalog_analytics.cli list countries                 # Distinct countries
  python -m catalog_analytics.cli list directors --lenient       # Skip malformed values

  python -m catalog_analytics.cli years                          # Releases per year
  python -m catalog_analytics.cli years --added                  # Additions per year

  python -m catalog_analytics.cli durations movies               # Runtime distribution

  python -m catalog_analytics.cli serve                          # Start API server
  python -m catalog_analytics.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from catalog_analytics.config import DATA_FILE, STRICT_PARSING
from catalog_analytics.data.store import CatalogStore
from catalog_analytics.errors import CatalogError
from catalog_analytics.analytics.aggregates import duration_stats
from catalog_analytics.analytics.summary import catalog_summary

LIST_FIELDS = ["types", "titles", "directors", "actors", "countries", "categories"]


def _load(args) -> CatalogStore:
    strict = STRICT_PARSING and not getattr(args, "lenient", False)
    return CatalogStore().load(Path(args.file), strict=strict)


def _fmt(value) -> str:
    if value is None:
        return "-"
    if isinstance(value, int):
        return f"{value:,}"
    return str(value)


def cmd_summary(args):
    """Print the catalog summary."""
    s = catalog_summary(_load(args))

    print("\n" + "=" * 70)
    print("  CATALOG SUMMARY")
    print("=" * 70)
    print(f"  Source:        {s['source']}")
    print(f"  Titles:        {s['titles']:,} ({s['distinct_titles']:,} distinct)")
    for t in s["type_mix"]:
        print(f"    {t['type']:<20}{t['count']:>8,}  {t['share']:>5.1f}%")
    print(f"  Released:      {_fmt(s['released']['first'])} to {_fmt(s['released']['last'])}"
          f" (peak {_fmt(s['released']['peak'])})")
    print(f"  Added:         {_fmt(s['added']['first'])} to {_fmt(s['added']['last'])}"
          f" (peak {_fmt(s['added']['peak'])})")
    mm, ss = s["movie_minutes"], s["show_seasons"]
    print(f"  Movie runtime: median {_fmt(mm['median'])} min, max {_fmt(mm['max'])} min")
    print(f"  Show length:   median {_fmt(ss['median'])} seasons, max {_fmt(ss['max'])} seasons")
    print(f"  Directors {s['directors']:,} | Actors {s['actors']:,} | "
          f"Countries {s['countries']:,} | Categories {s['categories']:,}")
    if s["diagnostics"]:
        print(f"  Skipped values: {s['diagnostics']:,}")
    print("=" * 70 + "\n")


def cmd_list(args):
    """Print every distinct value of one field."""
    store = _load(args)
    values = getattr(store, args.field)()
    print(f"\n{args.field.upper()} ({len(values):,}):\n")
    for v in values:
        print(f"  {v}")


def cmd_years(args):
    """Print the per-year counts that are non-zero."""
    store = _load(args)
    series = store.added_series() if args.added else store.release_series()
    label = "ADDED" if args.added else "RELEASED"
    print(f"\nTITLES {label} PER YEAR ({store.year_start}-{store.year_end}):\n")
    for year, count in zip(series.years, series.counts):
        if count:
            print(f"  {year}  {count:>6,}")
    print(f"\n  Total: {series.total:,}")


def cmd_durations(args):
    """Print the duration distribution for movies or shows."""
    store = _load(args)
    values = store.durations_movies() if args.kind == "movies" else store.durations_shows()
    unit = "min" if args.kind == "movies" else "seasons"
    stats = duration_stats(values)
    print(f"\n{args.kind.upper()} ({stats['count']:,}):")
    for key in ["min", "median", "mean", "p90", "max"]:
        print(f"  {key:<7}{_fmt(stats[key])} {unit}")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    from catalog_analytics.main import create_app

    strict = STRICT_PARSING and not args.lenient
    print(f"\nStarting Catalog Analytics API on port {args.port}...")
    if args.reload:
        # The reloader re-imports the app in a child process, so pass settings via env
        os.environ["CATALOG_DATA_FILE"] = str(args.file)
        os.environ["CATALOG_STRICT"] = "1" if strict else "0"
        uvicorn.run("catalog_analytics.main:app", host="0.0.0.0", port=args.port, reload=True,
                    timeout_keep_alive=65)
    else:
        uvicorn.run(create_app(args.file, strict=strict), host="0.0.0.0", port=args.port,
                    timeout_keep_alive=65)


def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--file", default=str(DATA_FILE), help=f"Catalog CSV (default {DATA_FILE})")
    p.add_argument("--lenient", action="store_true", help="Leave malformed values empty instead of failing")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Catalog Analytics — typed titles, per-year counts, durations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    summary_parser = subparsers.add_parser("summary", help="Catalog summary")
    _add_source_args(summary_parser)
    summary_parser.set_defaults(func=cmd_summary)

    list_parser = subparsers.add_parser("list", help="Distinct values of a field")
    list_parser.add_argument("field", choices=LIST_FIELDS)
    _add_source_args(list_parser)
    list_parser.set_defaults(func=cmd_list)

    years_parser = subparsers.add_parser("years", help="Titles per year")
    years_parser.add_argument("--added", action="store_true", help="Count by year added instead of released")
    _add_source_args(years_parser)
    years_parser.set_defaults(func=cmd_years)

    durations_parser = subparsers.add_parser("durations", help="Duration distribution")
    durations_parser.add_argument("kind", choices=["movies", "shows"])
    _add_source_args(durations_parser)
    durations_parser.set_defaults(func=cmd_durations)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    _add_source_args(serve_parser)
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    try:
        args.func(args)
    except CatalogError as exc:
        print(f"\nError: {exc}\n", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

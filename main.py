#!/usr/bin/env python3
'''
Peak wind report for every hurricane of one year in a HURDAT2 track file.

Usage:
    python main.py -f hurdat2-nepac.txt -y 2009 -v 1
    python main.py -c run.yml --csv peaks.csv
'''
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import config
from config_loader import ConfigError, RunConfig, load_config
from core_models import StormSummary
from exporter import save_excel, write_summaries_csv
from line_source import TrackFileReader
from plotter import StormPlotter
from reporter import ConsoleReporter
from session import ParseSession
from track_errors import InputUnavailableError, TrackIOError, TrackParseError
from track_parsers import DataLineParser, HeaderParser


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hurricane-peaks",
        description="Report the max sustained wind (km/h) of each hurricane recorded in a given year.",
    )
    parser.add_argument(
        "-f", "--file",
        type=Path,
        default=None,
        help="Track file to read data from (required unless set in the config file).",
    )
    parser.add_argument(
        "-y", "--year",
        type=int,
        default=None,
        help=f"Year to lookup (default: {config.DEFAULT_YEAR}).",
    )
    parser.add_argument(
        "-v", "--verbose",
        type=int,
        choices=range(0, config.MAX_VERBOSITY + 1),
        default=None,
        help=f"Level of verbosity (max: {config.MAX_VERBOSITY}).",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Optional YAML run configuration.",
    )
    parser.add_argument(
        "--basins",
        nargs="+",
        default=None,
        help="Basin codes accepted in storm ids (default: AL EP CP).",
    )
    parser.add_argument("--csv", type=Path, default=None, help="Write the summaries to this CSV file.")
    parser.add_argument("--excel", type=Path, default=None, help="Write the summaries to this Excel file.")
    parser.add_argument("--plot", type=Path, default=None, help="Save a peak wind chart to this PNG file.")
    return parser


def resolve_config(args: argparse.Namespace) -> RunConfig:
    base = load_config(args.config) if args.config is not None else RunConfig(input_path=None)
    basins = tuple(b.strip().upper() for b in args.basins) if args.basins else None
    return base.with_overrides(
        input_path=args.file,
        year=args.year,
        verbosity=args.verbose,
        basins=basins,
        csv_path=args.csv,
        excel_path=args.excel,
        plot_path=args.plot,
    )


def run(cfg: RunConfig, reporter: ConsoleReporter) -> List[StormSummary]:
    '''Single pass over cfg.input_path; errors propagate to the caller.'''
    if cfg.input_path is None:
        raise ConfigError("input_path is required")
    session = ParseSession(
        cfg.year,
        reporter,
        header_parser=HeaderParser(cfg.basins),
        data_parser=DataLineParser(),
    )
    reporter.opening_file(cfg.input_path)
    with TrackFileReader(cfg.input_path, encoding=cfg.encoding) as reader:
        return session.run(reader)


def export(cfg: RunConfig, summaries: List[StormSummary]) -> None:
    if cfg.csv_path is not None:
        write_summaries_csv(cfg.csv_path, summaries, cfg.year)
    if cfg.excel_path is not None:
        save_excel(cfg.excel_path, summaries, cfg.year)
    if cfg.plot_path is not None:
        StormPlotter(cfg.year).plot(summaries, cfg.plot_path)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        cfg = resolve_config(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    if cfg.input_path is None:
        parser.error("the following arguments are required: -f/--file")

    reporter = ConsoleReporter(cfg.verbosity)
    try:
        summaries = run(cfg, reporter)
    except TrackParseError as exc:
        reporter.parse_error(exc)
        return 1
    except (InputUnavailableError, TrackIOError) as exc:
        reporter.error(str(exc))
        return 1

    export(cfg, summaries)
    return 0


if __name__ == "__main__":
    sys.exit(main())

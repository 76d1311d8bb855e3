"""CLI commands for printing prayer time tables."""

from __future__ import annotations

import csv
import json
import os
from typing import Iterable, List, Optional, TextIO

import click

from ..constants import PRAYER_NAMES
from ..errors import InvalidGeo, PolarEdgeCase
from ..prayer import GeoParams, PrayerTimes, PrayerTimesRange, compute_for
from .common import location_options, parse_date_input

OUTPUT_FORMATS = ["text", "csv", "json"]


def _write_csv(rows: Iterable[PrayerTimes], output: TextIO, seconds: bool) -> None:
    """Write prayer times to CSV format."""
    headers = ["date", *PRAYER_NAMES]
    writer = csv.DictWriter(output, fieldnames=headers, extrasaction="ignore")
    writer.writeheader()
    for row in rows:
        writer.writerow(row.to_dict(seconds=seconds))
    output.flush()


def _write_text(rows: Iterable[PrayerTimes], output: TextIO, seconds: bool) -> None:
    """Write a readable one-line-per-day summary."""
    for row in rows:
        data = row.to_dict(seconds=seconds)
        times = " ".join(f"{name.capitalize()} {data[name]}" for name in PRAYER_NAMES)
        line = f"{data['date']}  {times}"
        if row.clamped:
            line += f"  (clamped: {', '.join(row.clamped)})"
        output.write(line + "\n")
    output.flush()


def _write_output(
    rows: List[PrayerTimes], fmt: str, output: TextIO, seconds: bool
) -> None:
    """Write prayer times in the requested output format."""
    if fmt == "csv":
        _write_csv(rows, output, seconds)
    elif fmt == "json":
        json.dump([row.to_dict(seconds=seconds) for row in rows], output, indent=2)
        output.write("\n")
    elif fmt == "text":
        _write_text(rows, output, seconds)
    else:  # pragma: no cover - handled by click
        raise click.BadParameter(f"Unsupported format: {fmt}")


def _geo_or_fail(latitude: float, longitude: float, utc_offset: float) -> GeoParams:
    try:
        return GeoParams(latitude, longitude, utc_offset)
    except InvalidGeo as exc:
        raise click.BadParameter(str(exc)) from exc


def _emit(rows: List[PrayerTimes], fmt: str, output: Optional[str], seconds: bool) -> None:
    if output:
        directory = os.path.dirname(output)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output, "w", encoding="utf-8", newline="") as out_stream:
            _write_output(rows, fmt, out_stream, seconds)
    else:
        _write_output(rows, fmt, click.get_text_stream("stdout"), seconds)


_format_option = click.option(
    "--format",
    "fmt",
    type=click.Choice(OUTPUT_FORMATS),
    default="text",
    help="Output format. Defaults to text.",
)
_seconds_option = click.option(
    "--seconds", is_flag=True, help="Print HH:MM:SS instead of HH:MM."
)
_strict_option = click.option(
    "--strict",
    is_flag=True,
    help="Fail instead of clamping when the sun never reaches a prayer's altitude.",
)
_output_option = click.option(
    "--output",
    type=click.Path(),
    help="Output file path. If omitted, results are printed to stdout.",
)


@click.command()
@click.option(
    "--date",
    "-d",
    "date_str",
    default="today",
    help="Date in ISO format (YYYY-MM-DD) or 'today'. Defaults to today.",
)
@location_options
@_format_option
@_seconds_option
@_strict_option
@_output_option
def times(
    date_str: str,
    latitude: float,
    longitude: float,
    utc_offset: float,
    fmt: str,
    seconds: bool,
    strict: bool,
    output: Optional[str],
) -> None:
    """Print the prayer times for a single day."""
    geo = _geo_or_fail(latitude, longitude, utc_offset)
    day = parse_date_input(date_str, geo.utc_offset)

    try:
        result = compute_for(day, geo, strict=strict)
    except PolarEdgeCase as exc:
        raise click.ClickException(str(exc)) from exc

    _emit([result], fmt, output, seconds)


@click.command(name="range")
@click.option(
    "--start",
    required=True,
    help="First date of the table (ISO format or 'today').",
)
@click.option(
    "--stop",
    required=True,
    help="Last date of the table, inclusive (ISO format or 'today').",
)
@location_options
@_format_option
@_seconds_option
@_strict_option
@_output_option
def range_(
    start: str,
    stop: str,
    latitude: float,
    longitude: float,
    utc_offset: float,
    fmt: str,
    seconds: bool,
    strict: bool,
    output: Optional[str],
) -> None:
    """Print the prayer times for every day from START to STOP."""
    geo = _geo_or_fail(latitude, longitude, utc_offset)
    start_date = parse_date_input(start, geo.utc_offset)
    stop_date = parse_date_input(stop, geo.utc_offset)

    days = PrayerTimesRange(start_date, stop_date, geo, strict=strict)
    try:
        rows = list(days)
    except PolarEdgeCase as exc:
        raise click.ClickException(str(exc)) from exc

    _emit(rows, fmt, output, seconds)

    click.echo(f"Computed prayer times for {len(rows)} day(s) at {geo}", err=True)

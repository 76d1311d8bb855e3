"""
Command-line interface utilities for libmuslim.

This module handles logging configuration and the option parsing shared by
the libmuslim commands.
"""

import logging
from typing import Any, Dict

import click

from ..errors import PrayerTimeError
from ..logging import set_log_level
from ..space_time.calendar import CalendarDate
from ..space_time.pythonic_datetimes import local_today


def configure_logging(args: Dict[str, Any]) -> None:
    """
    Configure logging based on command line arguments.

    Args:
        args: Parsed command line flags (quiet, debug, verbose)
    """
    quiet = args.get("quiet", False)
    debug = args.get("debug", False)
    verbosity = args.get("verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # Convert verbosity count to log level
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    # Apply log level to all libmuslim loggers
    set_log_level(log_level)

    logging.getLogger("libmuslim").debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
    )


def parse_date_input(date_str: str, utc_offset: float = 0.0) -> CalendarDate:
    """Parse a date given on the command line.

    Args:
        date_str: ISO date (e.g. "2024-03-15") or "today"
        utc_offset: Offset in hours of the clock that decides what "today" is

    Returns:
        A validated CalendarDate

    Raises:
        click.BadParameter: If the date is invalid
    """
    if date_str.lower() == "today":
        return CalendarDate.from_date(local_today(utc_offset))
    try:
        return CalendarDate.parse(date_str)
    except PrayerTimeError as exc:
        raise click.BadParameter(str(exc)) from exc


def location_options(func):
    """Attach the --lat/--lon/--utc-offset options to a command."""
    func = click.option(
        "--utc-offset",
        "utc_offset",
        type=float,
        required=True,
        help="Offset of local clock time from UTC in hours (e.g. 7 for WIB).",
    )(func)
    func = click.option(
        "--lon",
        "longitude",
        type=float,
        required=True,
        help="Longitude in degrees, positive east.",
    )(func)
    func = click.option(
        "--lat",
        "latitude",
        type=float,
        required=True,
        help="Latitude in degrees, positive north.",
    )(func)
    return func

"""
Command-line interface: `wttr <city>`.

Resolves the single city argument, fetches its current weather from wttr.in
and prints it. Every failure is reported on stdout and exits with status 1.
"""

import sys
from typing import Sequence

from loguru import logger
from rich.console import Console

from wttr_cli.errors import ArgumentError, FetchError
from wttr_cli.models import WeatherReport
from wttr_cli.providers.wttr import fetch_weather

# City names are printed verbatim, never as rich markup or emoji codes
console = Console(markup=False, emoji=False, highlight=False, soft_wrap=True)


def resolve_city(argv: Sequence[str]) -> str:
    """
    Return the one city name given after the program name.

    Multiple words are not joined: `wttr New York` is rejected, the city has
    to be quoted as a single argument. An empty argument is returned as is;
    wttr.in then answers for the caller's IP location.

    Raises:
        ArgumentError: If there is no argument or more than one.
    """
    if len(argv) < 2:
        raise ArgumentError("no arguments provided")
    if len(argv) > 2:
        raise ArgumentError("too many arguments provided")
    return argv[1]


def format_report(city: str, report: WeatherReport) -> list[str]:
    current = report.current
    if current is None:
        return ["Could not find weather information."]

    lines = [
        f"Weather for {city}:",
        f"Temperature: {current.temp_c}°C",
        f"Feels Like: {current.feels_like_c}°C",
    ]
    if current.description is not None:
        lines.append(f"Description: {current.description}")
    return lines


def _configure_logging() -> None:
    # Diagnostics go to stderr and only from WARNING up; stdout is the report
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    _configure_logging()
    if argv is None:
        argv = sys.argv

    try:
        city = resolve_city(argv)
    except ArgumentError as e:
        console.print(f"Error: {e}")
        return 1

    try:
        report = fetch_weather(city)
    except FetchError as e:
        console.print(f"Error fetching weather: {e}")
        return 1

    for line in format_report(city, report):
        console.print(line)
    return 0

"""wttr.in current-weather lookup."""

from contextlib import nullcontext
from urllib.parse import quote

import httpx
from loguru import logger
from pydantic import ValidationError

from wttr_cli.errors import DecodeError, StatusError, TransportError
from wttr_cli.models import WeatherReport


# format=j1 asks wttr.in for JSON instead of its ANSI text art
WTTR_URL_TEMPLATE = "https://wttr.in/{city}?format=j1"

SUCCESS_STATUS = 200


def build_url(city: str) -> str:
    """
    Build the wttr.in JSON URL for a city.

    The city is percent-encoded as a single path segment, so spaces,
    slashes and non-ASCII text all survive the trip. Arguments that were not
    valid UTF-8 keep their original bytes.
    """
    return WTTR_URL_TEMPLATE.format(city=quote(city, safe="", errors="surrogateescape"))


def fetch_weather(city: str, client: httpx.Client | None = None) -> WeatherReport:
    """
    Fetch the current weather for a city from wttr.in.

    Args:
        city: City name exactly as the user typed it.
        client: Optional httpx client to send the request with. It is left
            open; when omitted a client is created and closed here.

    Returns:
        The decoded weather report.

    Raises:
        TransportError: If the request could not be sent or the body read.
        StatusError: If wttr.in answered with a non-200 status.
        DecodeError: If the body is not the expected JSON.
    """
    url = build_url(city)
    logger.debug(f"Fetching weather from {url}")

    with (httpx.Client() if client is None else nullcontext(client)) as http:
        try:
            with http.stream("GET", url) as response:
                logger.debug(f"wttr.in responded {response.status_code}")

                if response.status_code != SUCCESS_STATUS:
                    status = f"{response.status_code} {response.reason_phrase}".strip()
                    logger.warning(f"Weather lookup for {city!r} failed with {status}")
                    raise StatusError(response.status_code, status)

                try:
                    body = response.read()
                except httpx.RequestError as e:
                    raise TransportError(f"could not read response body: {e}") from e
        except httpx.RequestError as e:
            logger.warning(f"Weather request to {url} failed: {e}")
            raise TransportError(f"could not get weather data: {e}") from e

    try:
        return WeatherReport.model_validate_json(body)
    except ValidationError as e:
        logger.warning(f"Unexpected weather payload for {city!r}")
        raise DecodeError(f"could not parse weather JSON: {e}") from e

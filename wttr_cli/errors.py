"""Errors reported to the user by the wttr CLI."""


class WeatherError(Exception):
    """Base class for every failure the CLI reports and exits on."""
    pass


class ArgumentError(WeatherError):
    """Raised when the command line does not hold exactly one city."""
    pass


class FetchError(WeatherError):
    """Raised when the weather report could not be fetched or decoded."""
    pass


class TransportError(FetchError):
    """Raised on network-level failures (DNS, connection, TLS, read)."""
    pass


class StatusError(FetchError):
    """Raised when wttr.in answers with anything other than 200 OK."""

    def __init__(self, status_code: int, status: str):
        super().__init__(f"weather API returned a non-success status: {status}")
        self.status_code = status_code
        self.status = status


class DecodeError(FetchError):
    """Raised when the response body is not the expected JSON shape."""
    pass

"""Errors raised while retrieving compendium data."""
from typing import Optional


class CompendiumError(Exception):
    """Base class for every error raised by this library."""


class InvalidBaseUrlError(CompendiumError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid base url of '{url}' provided")


class ResourceUrlError(CompendiumError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"An error occurred while trying to create the resource path for '{path}'")


class RequestError(CompendiumError):
    """The request could not be sent or no response was received."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"An error occurred while requesting data from {url}")


class NoDataFoundError(CompendiumError):
    """The API answered with a 4xx status for the requested resource."""

    def __init__(self, path: str, status_code: Optional[int] = None):
        self.path = path
        self.status_code = status_code
        super().__init__(f"There was no data found for '{path}'")


class ServerError(CompendiumError):
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"There was an unexpected error from the server (HTTP {status_code})")


class ResponseParsingError(CompendiumError):
    """The response body was not JSON, or not the shape that was asked for."""

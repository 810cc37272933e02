import logging
from typing import Any, Optional, Tuple

import certifi  # Provides Mozilla's CA bundle for SSL certificate verification
import requests
import urllib3
from pydantic import AnyHttpUrl, TypeAdapter, ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from hyrule_compendium.domain.inputs import CompendiumCategory, EntryIdentifier, GameMode
from hyrule_compendium.errors import (
    InvalidBaseUrlError,
    NoDataFoundError,
    RequestError,
    ResourceUrlError,
    ResponseParsingError,
    ServerError,
)
from hyrule_compendium.settings import CompendiumSettings, get_settings

logger = logging.getLogger(__name__)

USER_AGENT = "hyrule-compendium-python"

_HTTP_URL: TypeAdapter = TypeAdapter(AnyHttpUrl)


def validate_base_url(url: str) -> str:
    """Return the url as text if it is an absolute http(s) url."""
    try:
        return str(_HTTP_URL.validate_python(url))
    except ValidationError:
        raise InvalidBaseUrlError(str(url)) from None


class CompendiumAPIClient:
    def __init__(self,
                base_url: Optional[str] = None,
                timeout: Optional[float] = None,
                total_retries: Optional[int] = None,
                backoff_factor: Optional[float] = None,
                status_forcelist: Optional[Tuple[int, ...]] = None,
                session: Optional[requests.Session] = None,
                settings: Optional[CompendiumSettings] = None):
        """
        Initializes a requests.Session with:
            - JSON accept header and a library user agent
            - HTTPAdapter with an urllib3 Retry (no retries unless configured)
        Arguments left as None are taken from settings.
        """
        cfg = settings or get_settings()
        self.base_url: str = validate_base_url(base_url if base_url is not None else str(cfg.base_url))
        self.timeout: float = cfg.timeout if timeout is None else timeout
        if cfg.verify_ssl:
            self.verify = certifi.where()
        else:
            self.verify = False
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        total_retries = cfg.total_retries if total_retries is None else total_retries
        retry_strategy = Retry(
            total=total_retries,
            connect=total_retries,
            read=total_retries,
            backoff_factor=cfg.backoff_factor if backoff_factor is None else backoff_factor,
            status_forcelist=cfg.status_forcelist if status_forcelist is None else status_forcelist,
            allowed_methods=frozenset(["GET"]),
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)

        self.session = session or requests.Session()
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

        # Default headers
        self.session.headers.update({
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        })

    def __enter__(self) -> "CompendiumAPIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def build_url(self, path: str) -> str:
        """Join a resource path onto the base url."""
        if not path or not path.strip("/") or "://" in path or path.startswith("/"):
            raise ResourceUrlError(path)
        return f"{self.base_url.rstrip('/')}/{path}"

    @staticmethod
    def entry_path(identifier: EntryIdentifier, mode: GameMode = GameMode.STANDARD) -> str:
        return f"{mode.path_prefix}entry/{identifier.path_segment}"

    @staticmethod
    def category_path(category: CompendiumCategory) -> str:
        return f"category/{category.path_segment}"

    @staticmethod
    def all_entries_path(mode: GameMode = GameMode.STANDARD) -> str:
        return f"{mode.path_prefix}all"

    def _handle_response(self, resp: requests.Response, path: str) -> Any:
        """
            Check the status code and parse the JSON body.

            Args:
                resp: HTTP response object
                path: the resource path that was requested

            Returns:
                Parsed JSON data

            Raises:
                ServerError: for 5xx status codes
                NoDataFoundError: for 4xx status codes
                ResponseParsingError: if the body is not valid JSON
            """
        if resp.status_code >= 500:
            logger.error(f"HTTP {resp.status_code} error for {resp.url}: {resp.text[:200]}")
            raise ServerError(resp.status_code)

        if resp.status_code >= 400:
            logger.error(f"HTTP {resp.status_code} error for {resp.url}: {resp.text[:200]}")
            raise NoDataFoundError(path, resp.status_code)

        # Check if response has content
        if not resp.content:
            logger.warning(f"Empty response received for {resp.url}")
            return {}

        try:
            return resp.json()
        except ValueError as e:
            # JSON decode error
            logger.error(f"Invalid JSON response from {resp.url}: {resp.text[:200]}...")
            raise ResponseParsingError(f"Invalid JSON response: {e}") from e

    def get(self, path: str, params=None) -> Any:
        """
        Perform a GET request against the compendium, returning parsed JSON.

        Uses certifi's CA bundle for SSL verification unless verify_ssl is off.
        """
        url = self.build_url(path)
        logger.debug(f"GET {url}")
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout, verify=self.verify)
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise RequestError(url) from e
        return self._handle_response(resp, path)

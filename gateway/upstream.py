import json
import logging
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)


class TransportFailure(Exception):
    """A directory could not be reached or answered with something other than JSON."""

    def __init__(self, service: str, url: str, reason: str = None):
        self.service = service
        self.url = url
        self.reason = reason or f"Request to {service} failed"
        super().__init__(f"{service} ({url}): {self.reason}")


@dataclass
class UpstreamResponse:
    service: str
    url: str
    status_code: int
    content: bytes
    content_type: str

    def json(self) -> Any:
        try:
            return json.loads(self.content)
        except ValueError as e:
            raise TransportFailure(self.service, self.url, f"Invalid JSON body: {e}") from e


class DirectoryClient:
    """
    HTTP client for one directory service.

    Every call is a single GET with a timeout; failures are raised as
    TransportFailure and never retried.
    """

    def __init__(
        self,
        service: str,
        base_url: str,
        timeout: float = 10,
        session: Optional[requests.Session] = None
    ):
        self.service = service
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        # No shared session by default: each call is a one-off requests.get.
        self.session = session

    def _get(self, url: str) -> UpstreamResponse:
        logger.debug(f"GET {url} ({self.service})")
        try:
            get = self.session.get if self.session is not None else requests.get
            resp = get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"{self.service} unreachable at {url}: {e}")
            raise TransportFailure(self.service, url, str(e)) from e

        return UpstreamResponse(
            service=self.service,
            url=url,
            status_code=resp.status_code,
            content=resp.content,
            content_type=resp.headers.get('Content-Type', 'application/json')
        )

    def fetch_all(self) -> UpstreamResponse:
        return self._get(self.base_url)

    def fetch_by_id(self, record_id: Any) -> UpstreamResponse:
        return self._get(f"{self.base_url}/{quote(str(record_id), safe='')}")

    def list_all(self) -> Any:
        """Decoded list payload, whatever shape the directory returned."""
        return self.fetch_all().json()

    def get_by_id(self, record_id: Any) -> Any:
        return self.fetch_by_id(record_id).json()

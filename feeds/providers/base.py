from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from requests import Response

from .. import settings


logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """Base error for a weather fetch that produced no result."""

    kind = "fetch"


class TransportError(FetchError):
    """The request could not be sent or timed out."""

    kind = "transport"


class HTTPStatusError(FetchError):
    """The provider answered with a non-success status."""

    kind = "http-status"

    def __init__(self, status_code: int) -> None:
        super().__init__(f"weather API returned status {status_code}")
        self.status_code = status_code


class DecodeError(FetchError):
    """The response body was not the JSON document we expect."""

    kind = "decode"


@dataclass(frozen=True)
class RequestConfig:
    timeout: float = 10.0

    @classmethod
    def from_settings(cls) -> "RequestConfig":
        return cls(timeout=settings.http_timeout())


class WeatherProvider:
    """Base class for HTTP providers: one request, bounded by a timeout, no retries.

    The timeout is handed to ``requests`` as is, so it bounds the connect and
    each socket read separately rather than the request as a whole. A server
    that keeps trickling bytes can hold a call past ``RequestConfig.timeout``.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def _handle_response(self, response: Response) -> Response:
        if not 200 <= response.status_code < 300:
            self._log.error("Provider returned %s: %.200s", response.status_code, response.text)
            raise HTTPStatusError(response.status_code)
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise TransportError(f"weather API call timed out after {self.request_config.timeout}s") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise TransportError(f"weather API call failed: {exc}") from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> object:
        try:
            return response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise DecodeError(f"failed to parse weather response: {exc}") from exc


__all__ = [
    "DecodeError",
    "FetchError",
    "HTTPStatusError",
    "RequestConfig",
    "TransportError",
    "WeatherProvider",
]

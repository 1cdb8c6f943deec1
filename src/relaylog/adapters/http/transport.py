"""HTTP adapter – Transport port and HttpxTransport."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from relaylog.kernel.errors import DeliveryError


def _require_httpx() -> Any:
    try:
        import httpx  # type: ignore[import-untyped]
        return httpx
    except ImportError as exc:
        raise ImportError("Install 'httpx' to use the HTTPX transport") from exc


@runtime_checkable
class Transport(Protocol):
    """Port: deliver form fields to an address.

    Implementations raise :class:`DeliveryError` on any failure.
    """

    def post(self, address: str, fields: Mapping[str, Any]) -> Any: ...


class HttpxTransport:
    """Blocking httpx transport that form-encodes *fields* into a POST body.

    A fresh :class:`httpx.Client` is opened per delivery and closed on every
    exit path.  The httpx exception is chained as ``__cause__`` but kept out
    of the error payload, since its message repeats the full URL.
    """

    def __init__(self, timeout: float = 10.0, verify: bool = True, **kwargs: Any) -> None:
        self._timeout = timeout
        self._verify = verify
        self._client_kwargs = kwargs

    def post(self, address: str, fields: Mapping[str, Any]) -> Any:
        httpx = _require_httpx()
        try:
            with httpx.Client(timeout=self._timeout, verify=self._verify, **self._client_kwargs) as client:
                response = client.post(address, data=dict(fields))
                response.raise_for_status()
                return response
        except httpx.HTTPStatusError as exc:
            raise DeliveryError(
                service=_host(address),
                message=f"HTTP {exc.response.status_code} from chat endpoint",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.TimeoutException as exc:
            raise DeliveryError(
                service=_host(address), message="Chat endpoint timed out"
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise DeliveryError(
                service=_host(address),
                message=f"Could not reach chat endpoint: {type(exc).__name__}",
            ) from exc


def _host(address: str) -> str:
    """Host part of *address*; the path may carry a bot token and is dropped."""
    httpx = _require_httpx()
    try:
        return httpx.URL(address).host or "unknown"
    except httpx.InvalidURL:
        return "unknown"


__all__ = ["HttpxTransport", "Transport"]

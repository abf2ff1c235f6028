from __future__ import annotations

"""Small HTTP client used by the TokenHub pages to reach the backend."""

import logging
from typing import Any, Dict, Optional

import requests
from requests import HTTPError, Response

from tokenhub.lib import config
from tokenhub.state import ERC20Balance, NFTBalance

LOGGER = logging.getLogger(__name__)

_SHARED_CLIENT: Optional["ApiClient"] = None


def _sanitize_base(candidate: Optional[str]) -> Optional[str]:
    if not candidate:
        return None
    base = str(candidate).strip().rstrip("/")
    return base or None


class ApiClient:
    """Synchronous wrapper around a ``requests.Session`` bound to one base URL."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = _sanitize_base(base_url) or config.api_base_url()
        self.timeout = timeout if timeout is not None else config.request_timeout()
        self.session = session or requests.Session()
        self.session.headers["Accept"] = "application/json"
        self._last_error: Optional[str] = None

    def base(self) -> str:
        return self.base_url

    # -------------------------
    # Core request helpers
    # -------------------------
    def _build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, **kwargs: Any) -> Response:
        timeout = kwargs.pop("timeout", self.timeout)
        url = self._build_url(path)
        LOGGER.info("api request %s %s", method.upper(), url)
        try:
            response = self.session.request(method.upper(), url, timeout=timeout, **kwargs)
        except requests.RequestException as exc:
            self._last_error = str(exc)
            LOGGER.warning("api request failed: %s %s: %s", method.upper(), url, exc)
            raise
        try:
            response.raise_for_status()
        except HTTPError as exc:
            self._last_error = describe_error(exc)
            LOGGER.warning(
                "api error %s for %s %s: %s",
                response.status_code,
                method.upper(),
                url,
                self._last_error,
            )
            raise
        self._last_error = None
        return response

    @staticmethod
    def _parse_response(response: Response) -> Any:
        if response.status_code == 204 or not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return response.text

    def get(self, path: str, **params: Any) -> Any:
        response = self._request("GET", path, params=params or None)
        return self._parse_response(response)

    def explain_last_error(self) -> Optional[str]:
        return self._last_error

    # -------------------------
    # Balance endpoints
    # -------------------------
    def _balance_query(self, standard: str, wallet_address: str, contract_address: str) -> Dict[str, Any]:
        payload = self.get(
            f"/balance/{standard}",
            walletAddress=wallet_address,
            contractAddress=contract_address,
        )
        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected {standard} payload: {payload!r}")
        return payload

    def erc20_balance(self, wallet_address: str, contract_address: str) -> ERC20Balance:
        payload = self._balance_query("erc20", wallet_address, contract_address)
        return ERC20Balance.model_validate(payload)

    def erc721_balance(self, wallet_address: str, contract_address: str) -> NFTBalance:
        payload = self._balance_query("erc721", wallet_address, contract_address)
        return NFTBalance.model_validate(payload)

    def erc1155_balance(self, wallet_address: str, contract_address: str) -> NFTBalance:
        payload = self._balance_query("erc1155", wallet_address, contract_address)
        return NFTBalance.model_validate(payload)


def describe_error(exc: Exception) -> str:
    """Human message for a failed request; the backend body for HTTP errors."""

    response = getattr(exc, "response", None)
    if not isinstance(exc, HTTPError) or response is None:
        return str(exc)
    body = (response.text or "").strip()
    if body:
        return body
    return f"{response.status_code} {response.reason or 'error'}".strip()


def create_client(base_url: Optional[str] = None, *, timeout: Optional[float] = None) -> ApiClient:
    """Return a new client preconfigured with the backend base URL."""

    return ApiClient(base_url, timeout=timeout)


def get_client() -> ApiClient:
    """Return the process-wide client, creating it on first use."""

    global _SHARED_CLIENT
    if _SHARED_CLIENT is None:
        _SHARED_CLIENT = create_client()
    return _SHARED_CLIENT


def reset_client() -> None:
    """Drop the cached shared client so the next call re-reads configuration."""

    global _SHARED_CLIENT
    _SHARED_CLIENT = None


__all__ = [
    "ApiClient",
    "create_client",
    "describe_error",
    "get_client",
    "reset_client",
]

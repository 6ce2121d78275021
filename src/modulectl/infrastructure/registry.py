"""HTTP client for the product registry API.

Token exchange uses the OAuth client-credentials grant; each product is
registered with one POST. Registration outcomes are classified rather
than raised so a long identifier list is always processed to the end.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from modulectl.domain.products import SUCCESS, ClientCredentials

logger = logging.getLogger(__name__)


class TokenError(Exception):
    """The token endpoint did not issue an access token."""


class RegistryClient:
    """Thin wrapper over an ``httpx.Client`` bound to one registry."""

    def __init__(
        self,
        *,
        token_url: str,
        api_url: str,
        audience: str,
        user_agent: str = "",
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.token_url = token_url
        self.api_url = api_url.rstrip("/")
        self.audience = audience
        headers = {"Content-Type": "application/json"}
        if user_agent:
            headers["User-Agent"] = user_agent
        self._client = httpx.Client(headers=headers, timeout=timeout, transport=transport)
        self._token: str | None = None

    def __enter__(self) -> RegistryClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch_token(self, credentials: ClientCredentials) -> str:
        """Exchange *credentials* for a bearer token and remember it."""
        body = {
            "grant_type": "client_credentials",
            "client_id": credentials.client_id,
            "client_secret": credentials.secret,
            "audience": self.audience,
        }
        try:
            response = self._client.post(self.token_url, json=body)
            response.raise_for_status()
            payload: dict[str, Any] = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise TokenError(f"Token request failed: {exc}") from exc

        token = payload.get("access_token")
        if not token:
            raise TokenError("Token response did not include an access_token")
        self._token = str(token)
        logger.debug("Obtained access token from %s", self.token_url)
        return self._token

    def register_product(self, uuid: str, product_type: str, category: str) -> str:
        """Register one product and return its classified outcome.

        Returns ``success``; the server's message on a 400 validation
        failure; otherwise the transport or HTTP error message.
        """
        if self._token is None:
            msg = "fetch_token() must be called before register_product()"
            raise RuntimeError(msg)
        url = f"{self.api_url}/product/{uuid}"
        try:
            response = self._client.post(
                url,
                json={"type": product_type, "category": category},
                headers={"Authorization": f"Bearer {self._token}"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code == 400:
                return _server_message(exc.response) or str(exc)
            return str(exc)
        except httpx.HTTPError as exc:
            return str(exc) or type(exc).__name__
        return SUCCESS


def _server_message(response: httpx.Response) -> str | None:
    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return None

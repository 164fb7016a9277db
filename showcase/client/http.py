from typing import Any

import httpx

from showcase.client.client_logging import logger
from showcase.client.errors import (
    AuthError,
    MissingCredentialError,
    NetworkError,
    TimeoutError,
    UnknownError,
    error_from_status,
)
from showcase.client.token_store import MemoryTokenStore, TokenStore
from showcase.client.url_resolver import UrlResolver
from showcase.models.models.cli import ClientConfig


def extract_error_message(response: httpx.Response) -> str | None:
    """Prefer the ``message`` (or ``error``) field of a JSON body, else the raw text."""
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        return text[:300] or None
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if message:
            return str(message)
    return None


class HttpClient:
    """
    Thin async wrapper over ``httpx.AsyncClient`` bound to one backend.

    Converts transport failures and non-2xx responses into the error taxonomy
    of ``showcase.client.errors`` and never retries on its own.
    """

    def __init__(
        self,
        config: ClientConfig,
        token_store: TokenStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self.token_store = token_store if token_store is not None else MemoryTokenStore()
        self.resolver = UrlResolver(config.api_base_url)
        self._client = httpx.AsyncClient(
            base_url=config.api_base_url,
            timeout=config.read_timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def auth_headers(self) -> dict[str, str]:
        """
        Headers carrying the stored token, in both the bearer and legacy forms.

        Raises:
            MissingCredentialError: when no token is stored.
        """
        token = self.token_store.get()
        if not token:
            raise MissingCredentialError()
        return {"Authorization": f"Bearer {token}", "x-auth-token": token}

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        timeout: float | None = None,
        auth: bool = False,
    ) -> Any:
        headers = self.auth_headers() if auth else {}
        effective_timeout = timeout if timeout is not None else self.config.read_timeout
        logger.debug(f"{method} {path} params={params} timeout={effective_timeout}")

        try:
            response = await self._client.request(
                method,
                path,
                params=params,
                json=json,
                data=data,
                files=files,
                headers=headers,
                timeout=effective_timeout,
            )
        except httpx.TimeoutException as e:
            logger.error(f"{method} {path} timed out after {effective_timeout}s")
            raise TimeoutError(f"{method} {path} timed out after {effective_timeout}s") from e
        except httpx.TransportError as e:
            logger.error(f"{method} {path} failed without a response: {e!r}")
            raise NetworkError(f"{method} {path} failed: {e}") from e

        if response.is_success:
            return self._decode(response)

        error = error_from_status(response.status_code, extract_error_message(response))
        logger.error(f"{method} {path} -> {response.status_code}: {error.message}")
        if isinstance(error, AuthError):
            self.token_store.clear()
        raise error

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise UnknownError(f"Invalid JSON response from {response.request.url}") from e

    async def get(self, path: str, **kwargs) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs) -> Any:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs) -> Any:
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs) -> Any:
        return await self.request("DELETE", path, **kwargs)

"""
Signing middleware as httpx transports.

SigningTransport / AsyncSigningTransport wrap another transport and
sign every request before forwarding it:

1. Buffer the body (httpx keeps the bytes for the wrapped transport)
2. Build a SignRequest from method, URL path, body and headers
3. Call the signer
4. Set result headers and merge result query params, overwriting
5. Forward the request

If the signer raises, nothing is forwarded and the error propagates.
"""
import logging
from typing import Any, Optional

import httpx

from venuekit.application.dto.signing import SignRequest, SignResult
from venuekit.application.ports.outbound.signer_port import SignerPort

logger = logging.getLogger(__name__)

# Request extension carrying the per-request context for delegated signers
SIGN_CONTEXT_EXTENSION = "venuekit.sign_context"


def _sign_request(signer: SignerPort, request: httpx.Request, body: bytes) -> None:
    sign_request = SignRequest(
        method=request.method,
        path=request.url.path,
        body=body,
        timestamp="",
        headers=dict(request.headers),
    )
    context = request.extensions.get(SIGN_CONTEXT_EXTENSION)

    logger.debug(f"Signing request: {request.method} {request.url.path}")
    result = signer.sign(sign_request, context)
    _apply_result(request, result)


def _apply_result(request: httpx.Request, result: SignResult) -> None:
    for name, value in result.headers.items():
        request.headers[name] = value
    if result.query_params:
        request.url = request.url.copy_merge_params(result.query_params)


class SigningTransport(httpx.BaseTransport):
    """Synchronous signing transport."""

    def __init__(
        self,
        signer: SignerPort,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Args:
            signer: Signer applied to every request
            transport: Wrapped transport (defaults to httpx.HTTPTransport())
        """
        self._signer = signer
        self._transport = transport or httpx.HTTPTransport()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        body = request.read()
        _sign_request(self._signer, request, body)
        return self._transport.handle_request(request)

    def close(self) -> None:
        self._transport.close()


class AsyncSigningTransport(httpx.AsyncBaseTransport):
    """Asynchronous signing transport."""

    def __init__(
        self,
        signer: SignerPort,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._signer = signer
        self._transport = transport or httpx.AsyncHTTPTransport()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        body = await request.aread()
        _sign_request(self._signer, request, body)
        return await self._transport.handle_async_request(request)

    async def aclose(self) -> None:
        await self._transport.aclose()


def build_client(
    signer: SignerPort,
    transport: Optional[httpx.BaseTransport] = None,
    **client_kwargs: Any,
) -> httpx.Client:
    """
    Create an httpx.Client that signs every request.

    Args:
        signer: Signer to install
        transport: Underlying transport (defaults to httpx.HTTPTransport())
        **client_kwargs: Passed to httpx.Client (base_url, timeout, ...)
    """
    return httpx.Client(transport=SigningTransport(signer, transport), **client_kwargs)


def build_async_client(
    signer: SignerPort,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    **client_kwargs: Any,
) -> httpx.AsyncClient:
    """Async counterpart of build_client."""
    return httpx.AsyncClient(
        transport=AsyncSigningTransport(signer, transport),
        **client_kwargs,
    )

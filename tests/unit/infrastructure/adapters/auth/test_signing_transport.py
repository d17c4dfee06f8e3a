"""
Signing transport tests

httpx.MockTransport stands in for the network and captures what the
wrapped transport receives.
"""
import httpx
import jwt
import pytest

from venuekit.application.dto.signing import SignRequest, SignResult
from venuekit.application.ports.outbound.signer_port import SignerPort
from venuekit.exceptions import SigningError
from venuekit.infrastructure.adapters.auth.bearer_signer import BearerConfig, BearerSigner
from venuekit.infrastructure.adapters.auth.hmac_signer import HMACConfig, HMACSigner
from venuekit.infrastructure.adapters.auth.jwt_signer import JWTConfig, JWTSigner
from venuekit.infrastructure.adapters.auth.middleware import (
    SIGN_CONTEXT_EXTENSION,
    build_async_client,
    build_client,
)

BASE_URL = "https://api.example.com"


class RecordingSigner(SignerPort):
    """Returns a fixed result and remembers what it was asked to sign"""

    def __init__(self, result=None):
        self.requests = []
        self.contexts = []
        self._result = result or SignResult(headers={"X-Signed": "yes"})

    def sign(self, request: SignRequest, context=None) -> SignResult:
        self.requests.append(request)
        self.contexts.append(context)
        return self._result


class FailingSigner(SignerPort):
    def sign(self, request: SignRequest, context=None) -> SignResult:
        raise SigningError("boom")


@pytest.fixture
def captured():
    return []


@pytest.fixture
def mock_transport(captured):
    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={"ok": True})

    return httpx.MockTransport(handler)


class TestSigningTransport:
    """Synchronous client"""

    @pytest.mark.unit
    def test_signer_sees_method_path_and_body(self, mock_transport, captured):
        signer = RecordingSigner()
        with build_client(signer, mock_transport, base_url=BASE_URL) as client:
            client.post("/orders?limit=5", content=b'{"side":"BUY"}')

        signed = signer.requests[0]
        assert signed.method == "POST"
        assert signed.path == "/orders"
        assert signed.body == b'{"side":"BUY"}'
        assert signed.timestamp == ""
        # Body is still available to the wrapped transport
        assert captured[0].content == b'{"side":"BUY"}'

    @pytest.mark.unit
    def test_headers_are_applied(self, mock_transport, captured):
        signer = BearerSigner(BearerConfig(token="tok"))
        with build_client(signer, mock_transport, base_url=BASE_URL) as client:
            response = client.get("/quotes", headers={"Authorization": "Basic old"})

        assert response.status_code == 200
        assert captured[0].headers["Authorization"] == "Bearer tok"

    @pytest.mark.unit
    def test_query_params_are_merged(self, mock_transport, captured):
        signer = RecordingSigner(SignResult(query_params={"signature": "abc", "limit": "10"}))
        with build_client(signer, mock_transport, base_url=BASE_URL) as client:
            client.get("/orders", params={"limit": "5", "symbol": "BTC-USD"})

        params = captured[0].url.params
        assert params["signature"] == "abc"
        assert params["limit"] == "10"
        assert params["symbol"] == "BTC-USD"

    @pytest.mark.unit
    def test_signer_error_stops_request(self, mock_transport, captured):
        with build_client(FailingSigner(), mock_transport, base_url=BASE_URL) as client:
            with pytest.raises(SigningError):
                client.get("/orders")

        assert captured == []

    @pytest.mark.unit
    def test_context_from_extensions(self, mock_transport):
        signer = RecordingSigner()
        with build_client(signer, mock_transport, base_url=BASE_URL) as client:
            client.get("/vaults", extensions={SIGN_CONTEXT_EXTENSION: {"vault": "v1"}})
            client.get("/vaults")

        assert signer.contexts == [{"vault": "v1"}, None]

    @pytest.mark.unit
    def test_hmac_signature_matches_direct_signing(self, mock_transport, captured, fixed_time):
        config = HMACConfig(api_key="k", secret="c2VjcmV0", passphrase="p")
        signer = HMACSigner(config, time_provider=fixed_time)

        with build_client(signer, mock_transport, base_url=BASE_URL) as client:
            client.post("/orders", content=b"{}")

        expected = signer.sign(SignRequest(method="POST", path="/orders", body=b"{}"))
        assert captured[0].headers["CB-ACCESS-SIGN"] == expected.headers["CB-ACCESS-SIGN"]
        assert captured[0].headers["CB-ACCESS-TIMESTAMP"] == "1609459200"

    @pytest.mark.unit
    def test_signer_sees_existing_host_header(self, mock_transport):
        signer = RecordingSigner()
        with build_client(signer, mock_transport, base_url=BASE_URL) as client:
            client.get("/orders")

        assert signer.requests[0].header("Host") == "api.example.com"

    @pytest.mark.unit
    def test_jwt_uri_uses_request_host(self, mock_transport, captured, ec_private_key_pem, ec_private_key, fixed_time):
        """
        Given: a JWT signer behind the transport
        When: GET https://api.example.com/orders
        Then: the token's uri claim names the real host, not the default one
        """
        config = JWTConfig(key_name="organizations/o/apiKeys/k", private_key=ec_private_key_pem)
        signer = JWTSigner(config, time_provider=fixed_time)

        with build_client(signer, mock_transport, base_url=BASE_URL) as client:
            client.get("/orders")

        token = captured[0].headers["Authorization"][len("Bearer "):]
        claims = jwt.decode(
            token,
            ec_private_key.public_key(),
            algorithms=["ES256"],
            options={"verify_exp": False, "verify_nbf": False},
        )
        assert claims["uri"] == "GET api.example.com/orders"

    @pytest.mark.unit
    def test_signer_overrides_existing_query_param(self, mock_transport, captured):
        signer = RecordingSigner(SignResult(query_params={"timestamp": "signed"}))
        with build_client(signer, mock_transport, base_url=BASE_URL) as client:
            client.get("/orders?timestamp=original&symbol=ETH-USD")

        params = captured[0].url.params
        assert params.get_list("timestamp") == ["signed"]
        assert params["symbol"] == "ETH-USD"


class TestAsyncSigningTransport:
    """Asynchronous client"""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_headers_are_applied(self, mock_transport, captured):
        signer = RecordingSigner()
        async with build_async_client(signer, mock_transport, base_url=BASE_URL) as client:
            response = await client.post("/orders", content=b'{"a":1}')

        assert response.status_code == 200
        assert captured[0].headers["X-Signed"] == "yes"
        assert signer.requests[0].body == b'{"a":1}'

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_signer_error_stops_request(self, mock_transport, captured):
        async with build_async_client(FailingSigner(), mock_transport, base_url=BASE_URL) as client:
            with pytest.raises(SigningError):
                await client.get("/orders")

        assert captured == []

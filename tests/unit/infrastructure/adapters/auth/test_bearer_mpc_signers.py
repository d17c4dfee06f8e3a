"""
BearerSigner / MPCSigner tests
"""
import hashlib

import pytest

from venuekit.application.dto.signing import SignRequest
from venuekit.exceptions import ConfigurationError, SigningError
from venuekit.infrastructure.adapters.auth.bearer_signer import BearerConfig, BearerSigner
from venuekit.infrastructure.adapters.auth.mpc_signer import (
    HEADER_API_KEY,
    HEADER_SIGNATURE,
    HEADER_TIMESTAMP,
    MPCConfig,
    MPCSigner,
    default_mpc_signer_func,
)


class TestBearerSigner:
    """Static token"""

    @pytest.mark.unit
    def test_authorization_header(self):
        signer = BearerSigner(BearerConfig(token="abc123"))

        result = signer.sign(SignRequest(method="GET", path="/v1/quotes"))

        assert result.headers == {"Authorization": "Bearer abc123"}

    @pytest.mark.unit
    def test_request_is_ignored(self):
        signer = BearerSigner(BearerConfig(token="abc123"))

        first = signer.sign(SignRequest(method="GET", path="/a"))
        second = signer.sign(SignRequest(method="POST", path="/b", body=b"{}"))

        assert first == second

    @pytest.mark.unit
    @pytest.mark.parametrize("token", ["x", "t" * (1024 * 1024)])
    def test_header_is_exact_for_any_token_length(self, token):
        signer = BearerSigner(BearerConfig(token=token))

        result = signer.sign(SignRequest(method="GET", path="/v1/quotes"))

        assert result.headers["Authorization"] == "Bearer " + token

    @pytest.mark.unit
    def test_large_body_does_not_change_header(self):
        signer = BearerSigner(BearerConfig(token="abc123"))

        result = signer.sign(SignRequest(method="POST", path="/v1/orders", body=b"x" * (1024 * 1024)))

        assert result.headers == {"Authorization": "Bearer abc123"}

    @pytest.mark.unit
    def test_empty_token_rejected(self):
        with pytest.raises(ConfigurationError):
            BearerConfig(token="")


class TestMPCSigner:
    """Delegated signing"""

    @pytest.mark.unit
    def test_message_passed_to_signer_func(self, fixed_time):
        """
        Given: POST /api/v1/orders with a JSON body and timestamp 1234567890
        When: sign()
        Then: the delegated function gets timestamp+method+path+body and the context
        """
        seen = {}

        def signer_func(context, message):
            seen["context"] = context
            seen["message"] = message
            return "sig"

        signer = MPCSigner(MPCConfig(api_key="key-1", signer_func=signer_func), fixed_time)
        request = SignRequest(
            method="POST",
            path="/api/v1/orders",
            body=b'{"symbol":"BTC-USD"}',
            timestamp="1234567890",
        )

        result = signer.sign(request, context={"vault": "v1"})

        assert seen["message"] == b'1234567890POST/api/v1/orders{"symbol":"BTC-USD"}'
        assert seen["context"] == {"vault": "v1"}
        assert result.headers == {
            HEADER_API_KEY: "key-1",
            HEADER_TIMESTAMP: "1234567890",
            HEADER_SIGNATURE: "sig",
        }

    @pytest.mark.unit
    def test_none_and_empty_body_sign_identically(self, fixed_time):
        messages = []

        def signer_func(context, message):
            messages.append(message)
            return "sig"

        signer = MPCSigner(MPCConfig(api_key="key-1", signer_func=signer_func), fixed_time)

        signer.sign(SignRequest(method="GET", path="/api/v1/vaults", body=None, timestamp="1"))
        signer.sign(SignRequest(method="GET", path="/api/v1/vaults", body=b"", timestamp="1"))

        assert messages[0] == messages[1] == b"1GET/api/v1/vaults"

    @pytest.mark.unit
    def test_generated_timestamp_is_millis(self, fixed_time):
        signer = MPCSigner(MPCConfig(api_key="key-1", signer_func=default_mpc_signer_func), fixed_time)

        result = signer.sign(SignRequest(method="GET", path="/api/v1/vaults"))

        assert result.headers[HEADER_TIMESTAMP] == "1609459200000"

    @pytest.mark.unit
    def test_signer_failure_is_wrapped(self, fixed_time):
        def failing(context, message):
            raise RuntimeError("hsm unavailable")

        signer = MPCSigner(MPCConfig(api_key="key-1", signer_func=failing), fixed_time)

        with pytest.raises(SigningError) as exc_info:
            signer.sign(SignRequest(method="GET", path="/", timestamp="1"))

        assert "hsm unavailable" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.unit
    def test_default_signer_func(self):
        assert default_mpc_signer_func(None, b"abc") == hashlib.sha256(b"abc").hexdigest()

    @pytest.mark.unit
    def test_signer_func_required(self):
        with pytest.raises(ConfigurationError):
            MPCConfig(api_key="key-1", signer_func=None)

    @pytest.mark.unit
    def test_signer_func_must_be_callable(self):
        with pytest.raises(ConfigurationError):
            MPCConfig(api_key="key-1", signer_func="not callable")

    @pytest.mark.unit
    def test_api_key_required(self):
        with pytest.raises(ConfigurationError):
            MPCConfig(api_key="", signer_func=default_mpc_signer_func)

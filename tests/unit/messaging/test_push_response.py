"""Unit tests – PushResponse and result codes."""
from __future__ import annotations

import pytest

from hms_push.errors import SerializationError
from hms_push.messaging import TOKEN_FAILURE_CODES, PushResponse, ResponseCode
from hms_push.transport import HttpResponse


class TestPushResponse:
    def test_from_payload(self) -> None:
        response = PushResponse.from_payload({"code": "80000000", "msg": "Success", "requestId": "r-1"})
        assert response == PushResponse("80000000", "Success", "r-1")
        assert response.ok
        assert not response.token_expired

    def test_numeric_code_stringified(self) -> None:
        assert PushResponse.from_payload({"code": 80100000}).code == ResponseCode.PARTIAL_SUCCESS

    @pytest.mark.parametrize("code", sorted(TOKEN_FAILURE_CODES))
    def test_token_expired(self, code: str) -> None:
        response = PushResponse(code)
        assert response.token_expired
        assert not response.ok

    def test_provider_failure_is_data(self) -> None:
        response = PushResponse.from_payload({"code": ResponseCode.PARAMETER_ERROR, "msg": "bad"})
        assert not response.ok
        assert not response.token_expired

    @pytest.mark.parametrize("payload", [[], {"msg": "no code"}, "80000000"])
    def test_bad_envelope(self, payload: object) -> None:
        with pytest.raises(SerializationError):
            PushResponse.from_payload(payload)

    def test_from_http(self) -> None:
        http = HttpResponse(200, body=b'{"code":"80200003","msg":"token expired","requestId":"r"}')
        assert PushResponse.from_http(http).token_expired

    def test_from_http_non_json(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            PushResponse.from_http(HttpResponse(502, body=b"<html>bad gateway</html>"))
        assert exc_info.value.status == 502

    def test_envelope_without_code_keeps_request_id(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            PushResponse.from_http(HttpResponse(200, body=b'{"msg": "?", "requestId": "r-7"}'))
        assert exc_info.value.status == 200
        assert exc_info.value.request_id == "r-7"

    def test_codes(self) -> None:
        assert ResponseCode.TOKEN_FAILED == "80200001"
        assert ResponseCode.TOKEN_TIMEOUT == "80200003"
        assert ResponseCode.INTERNAL_ERROR == "81000001"

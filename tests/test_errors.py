"""Tests for common.error_messages and the app's exception handlers."""
import pytest
from fastapi.testclient import TestClient

from app import app
from common.error_messages import ApiError, ErrorCode, error_body, format_error_detail, get_error_response


class TestErrorCatalogue:
    """Every error code has a message and a status."""

    @pytest.mark.parametrize("code", list(ErrorCode))
    def test_every_code_is_mapped(self, code):
        message, status_code = get_error_response(code)
        assert message
        assert 400 <= status_code < 600

    def test_missing_upload_file_is_400(self):
        assert get_error_response(ErrorCode.MISSING_UPLOAD_FILE)[1] == 400

    def test_custom_message_is_appended(self):
        message, _ = get_error_response(ErrorCode.INVALID_FORMAT, "Expected an object.")
        assert message.endswith("Expected an object.")

    def test_format_error_detail(self):
        assert format_error_detail(ErrorCode.UNKNOWN_ERROR, "boom").endswith("(boom)")

    def test_api_error_carries_status(self):
        err = ApiError(ErrorCode.MISSING_UPLOAD_FILE, detail="no part")
        assert err.status_code == 400
        assert err.message == "No file was uploaded."
        assert "no part" in str(err)

    def test_error_body_shape(self):
        assert error_body("nope") == {"success": False, "message": "nope"}


@app.get("/_test/explode", include_in_schema=False)
def _explode():
    raise RuntimeError("simulated failure")


class TestUnhandledExceptions:
    """Unexpected failures become a structured 500 and the app keeps serving."""

    def test_unhandled_exception_is_500(self, set_delays):
        set_delays()
        with TestClient(app, raise_server_exceptions=False) as client:
            resp = client.get("/_test/explode")
            assert resp.status_code == 500
            assert resp.json() == {
                "success": False,
                "message": get_error_response(ErrorCode.UNKNOWN_ERROR)[0],
            }
            assert client.get("/").status_code == 200

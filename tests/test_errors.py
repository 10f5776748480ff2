"""Tests for gr4vy_sdk.models.errors."""
from __future__ import annotations

import json

import httpx
import pytest

from gr4vy_sdk.models.errors import (
    BadURL,
    DecodingError,
    Gr4vyError,
    Gr4vyErrorDetail,
    HttpError,
    InvalidGr4vyId,
    NetworkError,
)
from gr4vy_sdk.utils.error_handler import convert_exception


def _detail(location="body", pointer="/amount", message="must be greater than 0", type="value_error"):
    return Gr4vyErrorDetail(location=location, pointer=pointer, message=message, type=type)


class TestTaxonomy:
    @pytest.mark.parametrize(
        "error",
        [
            InvalidGr4vyId(),
            BadURL("ftp://example.com"),
            HttpError(500),
            NetworkError(RuntimeError("down")),
            DecodingError("bad"),
        ],
    )
    def test_all_kinds_are_gr4vy_errors(self, error):
        assert isinstance(error, Gr4vyError)
        assert isinstance(error, Exception)

    def test_invalid_id_message(self):
        assert str(InvalidGr4vyId()) == (
            "The provided Gr4vy ID is invalid or empty. Please check your configuration."
        )

    def test_bad_url_message(self):
        assert str(BadURL("nope")) == "Invalid URL configuration: nope"

    def test_network_error_keeps_cause(self):
        cause = httpx.ConnectError("connection refused")
        error = NetworkError(cause)
        assert error.exception is cause
        assert error.__cause__ is cause
        assert error.message == "Network error: connection refused"

    def test_decoding_error_message(self):
        assert DecodingError("oops").message == "Failed to process response: oops"


class TestStructuralEquality:
    def test_invalid_id_instances_are_equal(self):
        assert InvalidGr4vyId() == InvalidGr4vyId()
        assert hash(InvalidGr4vyId()) == hash(InvalidGr4vyId())

    def test_bad_url_equal_iff_urls_equal(self):
        assert BadURL("a") == BadURL("a")
        assert BadURL("a") != BadURL("b")

    def test_http_errors_deduplicate(self):
        details = [_detail()]
        errors = {
            HttpError(400, error_message="x", code="c", details=details),
            HttpError(400, error_message="x", code="c", details=list(details)),
            HttpError(401, error_message="x", code="c"),
        }
        assert len(errors) == 2

    def test_different_kinds_are_not_equal(self):
        assert DecodingError("x") != BadURL("x")

    def test_network_error_equality_follows_cause(self):
        cause = RuntimeError("boom")
        assert NetworkError(cause) == NetworkError(cause)
        assert NetworkError(cause) != NetworkError(RuntimeError("boom"))


class TestHttpErrorMessage:
    def test_message_with_code(self):
        error = HttpError(400, error_message="Bad things", code="bad_request")
        assert error.message == "API request failed with status 400 (bad_request): Bad things"

    def test_message_without_code_or_message(self):
        error = HttpError(503)
        assert error.message == "API request failed with status 503: Unknown error occurred"

    def test_single_detail_is_singular(self):
        error = HttpError(400, error_message="Invalid", details=[_detail()])
        assert error.message.endswith("(1 validation error)")

    def test_two_details_are_plural(self):
        error = HttpError(400, error_message="Invalid", details=[_detail(), _detail(pointer="/currency")])
        assert error.message.endswith("(2 validation errors)")

    def test_has_details(self):
        assert HttpError(400, details=[_detail()]).has_details()
        assert not HttpError(400).has_details()
        assert not HttpError(400, details=[]).has_details()

    def test_details_for_location(self):
        error = HttpError(
            400,
            details=[_detail(location="body"), _detail(location="query", pointer="/bin")],
        )
        query_details = error.get_details_for_location("query")
        assert [d.pointer for d in query_details] == ["/bin"]
        assert error.get_details_for_location("path") == []


class TestDetailedErrorMessage:
    def test_contains_location_and_pointer(self):
        error = HttpError(
            400,
            details=[
                Gr4vyErrorDetail(
                    location="body",
                    pointer="/amount",
                    message="amount must be greater than 0",
                    type="validation_error",
                )
            ],
        )
        detailed = error.get_detailed_error_message()
        assert "- body (/amount)" in detailed
        assert "amount must be greater than 0" in detailed

    def test_default_head_when_message_missing(self):
        error = HttpError(400, details=[_detail()])
        assert error.get_detailed_error_message() == (
            "Request failed\n- body (/amount): must be greater than 0"
        )

    def test_one_line_per_detail(self):
        error = HttpError(
            422,
            error_message="Validation failed",
            details=[_detail(), _detail(location="query", pointer=None, message="bin is required")],
        )
        assert error.get_detailed_error_message().splitlines() == [
            "Validation failed",
            "- body (/amount): must be greater than 0",
            "- query: bin is required",
        ]

    def test_without_details_returns_message(self):
        assert HttpError(404, error_message="Not found").get_detailed_error_message() == "Not found"
        assert HttpError(404).get_detailed_error_message() == "Unknown error occurred"


class TestFromResponse:
    def test_structured_body(self, mock_responses):
        body = json.dumps(mock_responses["validation_error"])
        error = HttpError.from_response(400, body)

        assert error.status_code == 400
        assert error.code == "bad_request"
        assert error.error_message == "Request failed validation"
        assert error.response_data == body.encode("utf-8")
        assert error.details[0].pointer == "/amount"
        assert error.message == (
            "API request failed with status 400 (bad_request): "
            "Request failed validation (1 validation error)"
        )

    def test_legacy_error_body(self):
        error = HttpError.from_response(401, '{"error": "Unauthorized"}')
        assert error.error_message == "Unauthorized"
        assert error.code is None
        assert not error.has_details()

    def test_plain_text_body(self):
        error = HttpError.from_response(502, "Bad Gateway")
        assert error.error_message == "Bad Gateway"

    def test_empty_body(self):
        error = HttpError.from_response(500, "")
        assert error.error_message is None
        assert error.message == "API request failed with status 500: Unknown error occurred"

    def test_to_dict(self, mock_responses):
        error = HttpError.from_response(400, json.dumps(mock_responses["validation_error"]))
        as_dict = error.to_dict()
        assert as_dict["error"]["type"] == "HttpError"
        assert as_dict["error"]["status_code"] == 400
        assert as_dict["error"]["details"][0]["location"] == "body"


class TestConvertException:
    def test_gr4vy_errors_pass_through(self):
        error = BadURL("x")
        assert convert_exception(error, "ctx") is error

    def test_timeout_becomes_network_error(self):
        converted = convert_exception(httpx.ReadTimeout("timed out"), "PaymentOptions.list")
        assert isinstance(converted, NetworkError)
        assert "Request timeout in PaymentOptions.list" in converted.message

    def test_connect_error_becomes_network_error(self):
        converted = convert_exception(httpx.ConnectError("refused"), "ctx")
        assert isinstance(converted, NetworkError)
        assert "Connection failed" in converted.message

    def test_value_error_mentioning_url(self):
        converted = convert_exception(ValueError("invalid URL given"), "ctx")
        assert isinstance(converted, BadURL)

    def test_other_value_error(self):
        converted = convert_exception(ValueError("amount"), "ctx")
        assert isinstance(converted, DecodingError)

    def test_json_error_becomes_decoding_error(self):
        with pytest.raises(json.JSONDecodeError) as exc_info:
            json.loads("{")
        assert isinstance(convert_exception(exc_info.value, "ctx"), DecodingError)

    def test_unknown_exception_becomes_network_error(self):
        converted = convert_exception(RuntimeError("weird"), "ctx")
        assert isinstance(converted, NetworkError)
        assert "Unexpected error in ctx" in converted.message

"""Error hierarchy: status codes and response envelopes."""

from restaurantes_api.core.errors import (
    ApiError, ErrorCategory, InvalidBodyError, StoreError,
)


def test_store_error_is_500_with_driver_message():
    err = StoreError("duplicate key value violates unique constraint", "commit")
    assert err.http_status == 500
    assert err.category == ErrorCategory.DATABASE
    assert err.operation == "commit"
    assert err.to_response() == {
        "error": "duplicate key value violates unique constraint",
        "code": "STORE_ERROR",
    }


def test_invalid_body_error_is_400():
    err = InvalidBodyError("Malformed JSON body")
    assert err.http_status == 400
    assert err.to_response()["code"] == "INVALID_BODY"


def test_all_errors_share_the_base_class():
    assert isinstance(StoreError("x"), ApiError)
    assert isinstance(InvalidBodyError("x"), ApiError)

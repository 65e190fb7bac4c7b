"""Unit tests for tagged results and their HTTP mapping."""

import pytest

from blog_api.api.deps import STATUS_BY_KIND, ResultError, unwrap
from blog_api.kernel.results import (
    Err,
    ErrorKind,
    Ok,
    forbidden,
    internal,
    not_found,
    unauthenticated,
    validation_failed,
)


class TestResults:
    """Tests for Ok/Err helpers."""

    def test_ok_carries_value(self):
        result = Ok(42)

        assert result.ok is True
        assert result.value == 42

    def test_error_helpers(self):
        assert not_found("post") == Err(ErrorKind.NOT_FOUND, "Post not found")
        assert forbidden("update", "comment") == Err(
            ErrorKind.FORBIDDEN, "Unauthorized to update this comment"
        )
        assert unauthenticated().kind is ErrorKind.UNAUTHENTICATED
        assert validation_failed("bad").message == "bad"
        assert internal("boom").ok is False


class TestStatusMapping:
    """Tests for the result-to-HTTP translation."""

    def test_every_kind_has_a_status(self):
        assert set(STATUS_BY_KIND) == set(ErrorKind)

    @pytest.mark.parametrize(
        "error, status_code",
        [
            (not_found("post"), 404),
            (forbidden("delete", "post"), 403),
            (unauthenticated(), 401),
            (validation_failed("bad"), 422),
            (internal("boom"), 500),
        ],
    )
    def test_unwrap_raises_mapped_status(self, error, status_code):
        with pytest.raises(ResultError) as exc_info:
            unwrap(error)

        assert exc_info.value.status_code == status_code
        assert exc_info.value.code == error.kind.value
        assert exc_info.value.detail == error.message

    def test_unauthenticated_sets_bearer_challenge(self):
        with pytest.raises(ResultError) as exc_info:
            unwrap(unauthenticated())

        assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}

    def test_unwrap_returns_value(self):
        assert unwrap(Ok("post")) == "post"

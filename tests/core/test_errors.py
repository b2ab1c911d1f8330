"""Tests for error types and codes."""

import pytest

from hostprof.core.errors import (
    ConfigError,
    ErrorCode,
    HostProfError,
    InternalError,
    ProfilingError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.PROFILING_START_FAILED, 3000),
            (ErrorCode.PROFILING_STOP_FAILED, 3000),
            (ErrorCode.PROFILING_SESSION_CLOSED, 3000),
            (ErrorCode.INTERNAL_ERROR, 9000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestHostProfError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = HostProfError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            retryable=True,
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "retryable": True,
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        """Error string representation is human readable."""
        error = HostProfError(code=ErrorCode.INTERNAL_ERROR, message="Something broke")

        assert str(error) == "[9001] INTERNAL_ERROR: Something broke"

    def test_given_error_when_raised_then_catchable_as_exception(self) -> None:
        """Typed errors behave as ordinary exceptions."""
        with pytest.raises(HostProfError) as exc_info:
            raise ProfilingError.start_failed("busy")

        assert exc_info.value.code == ErrorCode.PROFILING_START_FAILED


class TestConfigError:
    """ConfigError factory method tests."""

    @pytest.mark.parametrize(
        ("factory", "kwargs", "expected_code"),
        [
            (
                "parse_error",
                {"path": "/foo", "reason": "bad yaml"},
                ErrorCode.CONFIG_PARSE_ERROR,
            ),
            (
                "invalid_value",
                {"field": "worker.max_entries", "value": 0, "reason": "too small"},
                ErrorCode.CONFIG_INVALID_VALUE,
            ),
        ],
    )
    def test_given_factory_when_called_then_correct_code(
        self, factory: str, kwargs: dict[str, object], expected_code: ErrorCode
    ) -> None:
        """Factory methods produce errors with correct error codes."""
        error = getattr(ConfigError, factory)(**kwargs)

        assert error.code == expected_code

    def test_given_parse_error_when_created_then_path_in_details(self) -> None:
        """Parse error includes file path in details."""
        error = ConfigError.parse_error("/config.yaml", "invalid syntax")

        assert error.details["path"] == "/config.yaml"
        assert "invalid syntax" in error.message


class TestProfilingError:
    """ProfilingError factory method tests."""

    def test_given_stop_failed_when_created_then_session_in_details(self) -> None:
        """Stop failures name the session whose result was lost."""
        error = ProfilingError.stop_failed("abc123", "empty profile")

        assert error.code == ErrorCode.PROFILING_STOP_FAILED
        assert error.details == {"session_id": "abc123", "reason": "empty profile"}
        assert "abc123" in error.message

    def test_given_session_closed_when_created_then_not_retryable(self) -> None:
        """A closed session cannot be stopped again."""
        error = ProfilingError.session_closed("abc123")

        assert error.code == ErrorCode.PROFILING_SESSION_CLOSED
        assert error.retryable is False


class TestInternalError:
    """InternalError tests."""

    def test_given_unexpected_error_when_created_then_includes_extras(self) -> None:
        """Unexpected error captures arbitrary extra details."""
        error = InternalError.unexpected("boom", foo="bar", count=42)

        assert error.details == {"foo": "bar", "count": 42}
        assert error.code == ErrorCode.INTERNAL_ERROR

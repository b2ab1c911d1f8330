"""Tests for the unexpected-error channel."""

from unittest.mock import MagicMock

from structlog.testing import capture_logs

from hostprof.core.errors import ErrorCode, HostProfError, ProfilingError
from hostprof.core.reporting import ErrorReporter


class TestErrorReporter:
    def test_given_subscriber_when_report_then_error_forwarded(self) -> None:
        """Reported errors reach subscribers and are counted."""
        # Given
        reporter = ErrorReporter()
        listener = MagicMock()
        reporter.on_error.subscribe(listener)
        error = RuntimeError("worker gone")

        # When
        reporter.report(error)

        # Then
        listener.assert_called_once_with(error)
        assert reporter.report_count == 1

    def test_given_typed_error_when_report_then_logged_with_code(self) -> None:
        """Typed errors are logged with their code and details."""
        # Given
        reporter = ErrorReporter()
        error = ProfilingError.start_failed("busy")

        # When
        with capture_logs() as logs:
            reporter.report(error)

        # Then
        assert logs[0]["event"] == "unexpected_error"
        assert logs[0]["log_level"] == "error"
        assert logs[0]["code"] == 3001
        assert logs[0]["details"] == {"reason": "busy"}

    def test_given_plain_exception_when_report_then_logged_with_type(self) -> None:
        """Untyped exceptions are logged as internal errors with their class name."""
        reporter = ErrorReporter()

        with capture_logs() as logs:
            reporter.report(ValueError("bad"))

        assert logs[0]["code"] == 9001
        assert logs[0]["error"] == "INTERNAL_ERROR"
        assert logs[0]["details"] == {"error_type": "ValueError"}
        assert logs[0]["message"] == "Internal error: bad"

    def test_given_failing_subscriber_when_report_then_does_not_raise(self) -> None:
        """Reporting is fire-and-forget even when a subscriber breaks."""
        # Given
        reporter = ErrorReporter()
        reporter.on_error.subscribe(MagicMock(side_effect=RuntimeError("listener bug")))

        # When
        reporter.report(RuntimeError("original"))

        # Then
        assert reporter.report_count == 1

    def test_given_disposed_reporter_when_report_then_still_counts(self) -> None:
        """Disposal only detaches subscribers."""
        reporter = ErrorReporter()
        listener = MagicMock()
        reporter.on_error.subscribe(listener)

        reporter.dispose()
        reporter.report(RuntimeError("late"))

        listener.assert_not_called()
        assert reporter.report_count == 1

    def test_given_details_shadowing_log_fields_when_report_then_logged_nested(self) -> None:
        """Details never collide with the fields the reporter sets itself."""
        # Given
        reporter = ErrorReporter()
        listener = MagicMock()
        reporter.on_error.subscribe(listener)
        error = HostProfError(
            code=ErrorCode.PROFILING_START_FAILED,
            message="x",
            details={"message": "worker said no", "code": 1, "exc_info": True},
        )

        # When
        with capture_logs() as logs:
            reporter.report(error)

        # Then
        assert logs[0]["message"] == "x"
        assert logs[0]["code"] == 3001
        assert logs[0]["details"]["message"] == "worker said no"
        listener.assert_called_once_with(error)

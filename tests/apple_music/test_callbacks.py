"""Tests for Result and background dispatch."""

import logging
import threading

import pytest

from socially_music.apple_music.callbacks import Result, dispatch, run
from socially_music.apple_music.exceptions import (
    APIError,
    ErrorKind,
    NoDataError,
    TokenNilError,
)


class TestResult:
    """Tests for the Result container."""

    def test_success(self):
        result = Result.success([1, 2])

        assert result.ok
        assert result.value == [1, 2]
        assert result.error is None
        assert result.unwrap() == [1, 2]

    def test_failure(self):
        error = NoDataError("empty")
        result = Result.failure(error)

        assert not result.ok
        assert result.value is None
        assert result.error is error

    def test_unwrap_failure_raises_stored_error(self):
        error = TokenNilError("no token")

        with pytest.raises(TokenNilError) as exc_info:
            Result.failure(error).unwrap()

        assert exc_info.value is error

    def test_success_with_none_is_ok(self):
        assert Result.success(None).ok

    def test_result_is_immutable(self):
        with pytest.raises(AttributeError):
            Result.success(1).value = 2


class TestRun:
    """Tests for synchronous outcome capture."""

    def test_captures_value(self):
        assert run(lambda a, b=0: a + b, 1, b=2) == Result.success(3)

    def test_captures_service_error(self):
        def fails():
            raise NoDataError("nothing")

        result = run(fails)

        assert result.error.kind is ErrorKind.NO_DATA

    def test_other_exceptions_propagate(self):
        def broken():
            raise KeyError("bug")

        with pytest.raises(KeyError):
            run(broken)


class TestDispatch:
    """Tests for background dispatch."""

    def test_callback_called_once_with_result(self):
        results = []
        done = threading.Event()

        def callback(result):
            results.append(result)
            done.set()

        thread = dispatch(lambda x: x * 2, 21, callback=callback)
        thread.join(timeout=5)

        assert done.is_set()
        assert results == [Result.success(42)]

    def test_runs_on_separate_daemon_thread(self):
        seen = {}

        def operation():
            seen['thread'] = threading.current_thread()

        thread = dispatch(operation, callback=lambda result: None)
        thread.join(timeout=5)

        assert seen['thread'] is thread
        assert thread.daemon

    def test_error_delivered_to_callback(self):
        results = []

        def fails():
            raise TokenNilError("missing")

        thread = dispatch(fails, callback=results.append)
        thread.join(timeout=5)

        assert len(results) == 1
        assert results[0].error.kind is ErrorKind.TOKEN_NIL

    def test_unexpected_exception_delivered_as_api_error(self, caplog):
        results = []
        bug = KeyError("bug")

        def broken():
            raise bug

        with caplog.at_level(logging.ERROR):
            thread = dispatch(broken, callback=results.append)
            thread.join(timeout=5)

        assert len(results) == 1
        assert isinstance(results[0].error, APIError)
        assert results[0].error.kind is ErrorKind.API_ERROR
        assert results[0].error.__cause__ is bug
        assert "Unexpected error in broken" in caplog.text

from unittest.mock import MagicMock

import pytest

from gotour.shared.utils import RetryPolicy


class TestRetryPolicy:
    def test_returns_result_without_retry_on_success(self):
        operation = MagicMock(return_value=["ok"])

        result = RetryPolicy.retry_once().run(operation)

        assert result == ["ok"]
        operation.assert_called_once()

    def test_retry_once_returns_result_of_second_attempt(self):
        """1回目が失敗しても、2回目の結果を返す"""
        logger = MagicMock()
        operation = MagicMock(side_effect=[RuntimeError("timeout"), ["retried"]])

        result = RetryPolicy.retry_once(logger).run(operation, name="fetch_hotel_bookings")

        assert result == ["retried"]
        assert operation.call_count == 2
        logger.warning.assert_called_once()

    def test_raises_last_error_when_attempts_exhausted(self):
        operation = MagicMock(side_effect=[RuntimeError("first"), RuntimeError("second")])

        with pytest.raises(RuntimeError, match="second"):
            RetryPolicy.retry_once().run(operation)

    def test_no_retry_raises_immediately(self):
        operation = MagicMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            RetryPolicy.no_retry().run(operation)
        operation.assert_called_once()

    def test_max_attempts_must_be_positive(self):
        with pytest.raises(ValueError):
            RetryPolicy(max_attempts=0)

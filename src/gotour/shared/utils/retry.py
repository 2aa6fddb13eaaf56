from typing import Callable, TypeVar

from aws_lambda_powertools import Logger

T = TypeVar("T")


class RetryPolicy:
    """失敗時の再試行ポリシー（Strategy）

    max_attempts=1 なら再試行しない。最後の試行の例外はそのまま送出する。
    """

    def __init__(self, max_attempts: int = 1, logger: Logger | None = None) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._max_attempts = max_attempts
        self._logger = logger

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def run(self, operation: Callable[[], T], name: str = "operation") -> T:
        """operation を実行し、失敗したら上限まで再試行する"""
        attempt = 1
        while True:
            try:
                return operation()
            except Exception:
                if attempt >= self._max_attempts:
                    raise
                if self._logger is not None:
                    self._logger.warning(
                        "Retrying after failure",
                        extra={"operation": name, "attempt": attempt},
                    )
                attempt += 1

    @classmethod
    def no_retry(cls) -> "RetryPolicy":
        return cls(max_attempts=1)

    @classmethod
    def retry_once(cls, logger: Logger | None = None) -> "RetryPolicy":
        return cls(max_attempts=2, logger=logger)

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timezone

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class IsoDateTime:
    """日時(ISO 8601形式)

    タイムゾーンを持たない値は UTC とみなす。
    """

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None:
            object.__setattr__(self, "value", self.value.replace(tzinfo=timezone.utc))

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成"""
        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        return cls(value=dt)

    @classmethod
    def parse(cls, raw: object) -> IsoDateTime | None:
        """任意の値から生成する。解釈できない値は None（例外は送出しない）

        datetime / date / ISO 8601 文字列 / エポックミリ秒を受け付ける。
        """
        if raw is None or raw == "":
            return None
        try:
            if isinstance(raw, datetime):
                return cls(value=raw)
            if isinstance(raw, date):
                return cls(value=datetime.combine(raw, time.min))
            if isinstance(raw, bool):
                return None
            if isinstance(raw, (int, float)) or hasattr(raw, "as_integer_ratio"):
                return cls(
                    value=datetime.fromtimestamp(float(raw) / 1000, tz=timezone.utc)
                )
            if isinstance(raw, str):
                return cls.from_string(raw.strip())
        except (ValueError, OverflowError, OSError):
            return None
        return None

    @classmethod
    def now(cls) -> IsoDateTime:
        return cls(value=datetime.now(timezone.utc))

    def __str__(self) -> str:
        return self.value.isoformat()

    def is_before(self, other: IsoDateTime) -> bool:
        """他の日時より前かどうか"""
        return self.value < other.value

    def is_after(self, other: IsoDateTime) -> bool:
        """他の日時より後かどうか"""
        return self.value > other.value


def format_date(value: IsoDateTime | None, pattern: str = "%d/%m/%Y") -> str:
    """表示用に日付を整形する。不明な日付は "N/A" """
    if value is None:
        return NOT_AVAILABLE
    return value.value.strftime(pattern)

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


@dataclass(frozen=True)
class PartySize:
    """人数（大人 + 子供）

    件数のみ（例: 3）と {"adults": 2, "children": 1} の両方の形式を受け付ける。
    件数のみの場合は全員を大人として扱う。
    """

    adults: int = 0
    children: int = 0

    def __post_init__(self) -> None:
        if self.adults < 0 or self.children < 0:
            raise ValueError("Party size cannot be negative")

    @property
    def total(self) -> int:
        return self.adults + self.children

    def to_dict(self) -> dict[str, int]:
        return {"adults": self.adults, "children": self.children}

    @classmethod
    def from_value(cls, raw: object) -> PartySize:
        """件数・辞書・PartySize のいずれかから生成する。解釈できなければ 0 人"""
        if isinstance(raw, PartySize):
            return raw
        if isinstance(raw, Mapping) and ("adults" in raw or "children" in raw):
            return cls(
                adults=_to_count(raw.get("adults")),
                children=_to_count(raw.get("children")),
            )
        if _is_number(raw):
            return cls(adults=_to_count(raw))
        return cls()


def _is_number(raw: object) -> bool:
    if isinstance(raw, bool):
        return False
    return isinstance(raw, (int, float)) or hasattr(raw, "as_integer_ratio")


def _to_count(raw: object) -> int:
    """件数に変換する。NaN・無限大などの解釈できない値は 0"""
    if not _is_number(raw):
        return 0
    try:
        value = Decimal(str(raw))
    except InvalidOperation:
        return 0
    if not value.is_finite():
        return 0
    return max(int(value), 0)

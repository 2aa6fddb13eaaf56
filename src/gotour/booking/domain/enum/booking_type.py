from __future__ import annotations

from enum import Enum


class BookingType(str, Enum):
    """予約種別（永続化される判別子）"""

    TOUR = "tour"
    HOTEL = "hotel"
    FLIGHT = "flight"

    @property
    def subject_key(self) -> str:
        """予約対象を保持するフィールド名（tour / hotel / flight）"""
        return self.value

    @property
    def entity_type(self) -> str:
        """DynamoDB アイテムの entity_type"""
        return f"{self.name}_BOOKING"

    @property
    def reference_prefix(self) -> str:
        """予約参照コードの接頭辞（例: FLT-XXXXXX）"""
        return _REFERENCE_PREFIXES[self]

    @property
    def number_prefix(self) -> str:
        """予約番号の2文字の接頭辞"""
        return _NUMBER_PREFIXES[self]

    @classmethod
    def from_value(cls, raw: object) -> BookingType | None:
        """不明な値は None"""
        try:
            return cls(str(raw).lower())
        except ValueError:
            return None


_REFERENCE_PREFIXES = {
    BookingType.TOUR: "TOR",
    BookingType.HOTEL: "HTL",
    BookingType.FLIGHT: "FLT",
}

_NUMBER_PREFIXES = {
    BookingType.TOUR: "TB",
    BookingType.HOTEL: "HB",
    BookingType.FLIGHT: "FB",
}


class BookingFilter(str, Enum):
    """予約一覧の絞り込み"""

    ALL = "all"
    TOUR = "tour"
    FLIGHT = "flight"
    HOTEL = "hotel"

    def includes(self, booking_type: BookingType) -> bool:
        return self == BookingFilter.ALL or self.value == booking_type.value

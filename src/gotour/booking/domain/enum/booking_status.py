from __future__ import annotations

from enum import Enum

from gotour.shared.domain.exception import InvalidStatusException
from gotour.shared.utils.i18n import translate


class BookingStatus(str, Enum):
    """予約ステータス

    初期状態: PENDING / 終端状態: CANCELLED, COMPLETED
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: object, booking_type: str | None = None) -> BookingStatus:
        """境界から受け取った値を列挙値に変換する"""
        try:
            return cls(raw)
        except ValueError as e:
            raise InvalidStatusException(
                f"Invalid booking status: {raw!r}", booking_type=booking_type
            ) from e

    def label(self, locale: str | None = None) -> str:
        """表示用ラベル"""
        return translate(f"status.{self.value}", locale)

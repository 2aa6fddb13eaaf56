from __future__ import annotations

from enum import Enum

from gotour.shared.domain.exception import InvalidPaymentStatusException
from gotour.shared.utils.i18n import translate


class PaymentStatus(str, Enum):
    """支払いステータス（予約ステータスとは独立して遷移する）"""

    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"
    FAILED = "failed"

    @classmethod
    def parse(cls, raw: object, booking_type: str | None = None) -> PaymentStatus:
        """境界から受け取った値を列挙値に変換する"""
        try:
            return cls(raw)
        except ValueError as e:
            raise InvalidPaymentStatusException(
                f"Invalid payment status: {raw!r}", booking_type=booking_type
            ) from e

    def label(self, locale: str | None = None) -> str:
        return translate(f"payment_status.{self.value}", locale)

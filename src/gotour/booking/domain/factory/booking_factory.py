from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar

from gotour.booking.domain.enum import BookingType
from gotour.booking.domain.value_object import (
    BookingId,
    BookingNumber,
    BookingReference,
)
from gotour.shared.domain import Money
from gotour.shared.domain.exception import ValidationException
from gotour.shared.utils import Clock, utc_now


class BookingFactory:
    """予約エンティティ生成の共通処理

    - 予約ID・参照コード・予約番号の採番
    - 合計金額の決定（totalPrice -> 旧フィールド price）
    - 初期状態（PENDING / PENDING）は Booking の既定値に任せる
    """

    booking_type: ClassVar[BookingType]

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock

    def _identity(self) -> dict[str, Any]:
        """新規予約の識別子と作成日時"""
        now = self._clock()
        return {
            "id": BookingId.generate(),
            "booking_reference": BookingReference.generate(self.booking_type),
            "booking_number": BookingNumber.generate(
                self.booking_type, epoch_millis=int(now.timestamp() * 1000)
            ),
            "created_at": now,
        }

    def _total_price(self, total_price: object, price: object = None) -> Money:
        """合計金額。どちらも指定されていなければ ValidationException"""
        for raw in (total_price, price):
            amount = _to_amount(raw)
            if amount is not None:
                return Money.vnd(amount)
        raise ValidationException(
            "totalPrice is required", booking_type=self.booking_type.value
        )

    def _validation_error(self, message: str) -> ValidationException:
        return ValidationException(message, booking_type=self.booking_type.value)


def _to_amount(raw: object) -> Decimal | None:
    if raw is None or raw == "" or isinstance(raw, bool):
        return None
    try:
        amount = Decimal(str(raw))
    except InvalidOperation:
        return None
    if not amount.is_finite() or amount <= 0:
        return None
    return amount

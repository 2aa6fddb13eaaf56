from __future__ import annotations

import random
import time
from dataclasses import dataclass

from gotour.booking.domain.enum import BookingType


@dataclass(frozen=True)
class BookingNumber:
    """予約番号

    2文字の接頭辞 + エポックミリ秒の下6桁 + 4桁の乱数。
    例: FB4821931234
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("BookingNumber cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(
        cls, booking_type: BookingType, epoch_millis: int | None = None
    ) -> BookingNumber:
        """予約番号を生成する"""
        millis = epoch_millis if epoch_millis is not None else int(time.time() * 1000)
        timestamp = str(millis)[7:]
        random_digits = random.randint(1000, 9999)
        return cls(value=f"{booking_type.number_prefix}{timestamp}{random_digits}")

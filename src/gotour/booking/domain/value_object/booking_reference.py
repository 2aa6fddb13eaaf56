from __future__ import annotations

import re
import secrets
import string
from dataclasses import dataclass
from typing import ClassVar

from gotour.booking.domain.enum import BookingType


@dataclass(frozen=True)
class BookingReference:
    """予約参照コード

    接頭辞3文字 + "-" + 英大文字・数字6文字。
    例: FLT-7K2QZ9

    旧データの参照コードは形式が異なる場合があるため、
    読み込み時は空でないことだけを検証する。
    """

    value: str

    ALPHABET: ClassVar[str] = string.ascii_uppercase + string.digits
    LENGTH: ClassVar[int] = 6
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Z]{3}-[A-Z0-9]{6}$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not normalized:
            raise ValueError("BookingReference cannot be empty")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @property
    def is_standard(self) -> bool:
        """現行の形式かどうか"""
        return bool(self.PATTERN.match(self.value))

    @classmethod
    def generate(cls, booking_type: BookingType) -> BookingReference:
        """予約種別ごとの接頭辞で新しい参照コードを生成する"""
        suffix = "".join(secrets.choice(cls.ALPHABET) for _ in range(cls.LENGTH))
        return cls(value=f"{booking_type.reference_prefix}-{suffix}")

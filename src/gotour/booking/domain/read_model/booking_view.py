from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, computed_field

from gotour.booking.domain.enum import BookingStatus, BookingType, PaymentStatus
from gotour.shared.domain import Currency, IsoDateTime, Money
from gotour.shared.domain.value_object import format_date
from gotour.shared.utils import translate


class BookingView(BaseModel):
    """予約の正規化済みビュー（読み取り専用）"""

    model_config = ConfigDict(frozen=True)

    id: str
    booking_type: BookingType
    user_id: str | None = None
    subject_id: str | None = None
    name: str
    image: str
    total_price: Decimal = Decimal("0")
    currency: str = "VND"
    status: BookingStatus | None = BookingStatus.PENDING
    payment_status: PaymentStatus | None = PaymentStatus.PENDING
    start_at: datetime | None = None
    end_at: datetime | None = None
    duration: int = 0
    guest_count: int = 0
    booking_reference: str | None = None
    booking_number: str | None = None
    cancellation_reason: str | None = None
    destination: str | None = None
    room_name: str | None = None
    airline: str | None = None
    flight_number: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @computed_field
    @property
    def start_display(self) -> str:
        pattern = "%H:%M - %d/%m/%Y" if self.booking_type == BookingType.FLIGHT else "%d/%m/%Y"
        return format_date(_as_iso(self.start_at), pattern)

    @computed_field
    @property
    def end_display(self) -> str:
        return format_date(_as_iso(self.end_at))

    @computed_field
    @property
    def status_label(self) -> str:
        if self.status is None:
            return translate("placeholder.unknown")
        return self.status.label()

    @computed_field
    @property
    def formatted_price(self) -> str:
        try:
            return Money(self.total_price, Currency(self.currency)).format_vi()
        except ValueError:
            return f"{self.total_price} {self.currency}"

    @computed_field
    @property
    def can_confirm(self) -> bool:
        return self.status == BookingStatus.PENDING

    @computed_field
    @property
    def can_cancel(self) -> bool:
        return self.status not in (BookingStatus.CANCELLED, BookingStatus.COMPLETED)

    def sort_key(self) -> float:
        """作成日時の降順ソート用キー。作成日時がなければエポック 0"""
        created = _as_iso(self.created_at)
        return created.value.timestamp() if created is not None else 0.0


def _as_iso(value: datetime | None) -> IsoDateTime | None:
    return IsoDateTime(value=value) if value is not None else None

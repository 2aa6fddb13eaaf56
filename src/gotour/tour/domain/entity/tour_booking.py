from datetime import datetime
from typing import Any

from gotour.booking.domain.entity import Booking
from gotour.booking.domain.enum import BookingType
from gotour.shared.domain.exception import ValidationException


class TourBooking(Booking):
    """ツアー予約エンティティ

    終了日は開始日より前にできない。
    """

    booking_type = BookingType.TOUR

    def __init__(
        self, start_date: datetime, end_date: datetime | None = None, **kwargs: Any
    ) -> None:
        super().__init__(**kwargs)
        if end_date is not None and end_date < start_date:
            raise ValidationException(
                "Tour end date must not be before its start date",
                booking_type=self.booking_type.value,
            )
        self._start_date = start_date
        self._end_date = end_date

    @property
    def start_date(self) -> datetime:
        return self._start_date

    @property
    def end_date(self) -> datetime | None:
        return self._end_date

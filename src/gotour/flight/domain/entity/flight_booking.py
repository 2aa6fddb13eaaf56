from datetime import datetime
from typing import Any

from gotour.booking.domain.entity import Booking
from gotour.booking.domain.enum import BookingType
from gotour.flight.domain.value_object import ContactInfo, Passenger


class FlightBooking(Booking):
    """フライト予約エンティティ

    人数は搭乗者の数から決まる。
    """

    booking_type = BookingType.FLIGHT

    def __init__(
        self,
        passengers: list[Passenger],
        contact_info: ContactInfo | None = None,
        flight_code: str | None = None,
        flight_date: str | None = None,
        departure_time: datetime | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._passengers = list(passengers)
        self._contact_info = contact_info
        self._flight_code = flight_code
        self._flight_date = flight_date
        self._departure_time = departure_time

    @property
    def passengers(self) -> list[Passenger]:
        return list(self._passengers)

    @property
    def contact_info(self) -> ContactInfo | None:
        return self._contact_info

    @property
    def flight_code(self) -> str | None:
        """クライアントが指定したフライト番号"""
        return self._flight_code

    @property
    def flight_date(self) -> str | None:
        """クライアントが指定した搭乗日"""
        return self._flight_date

    @property
    def departure_time(self) -> datetime | None:
        return self._departure_time

from datetime import date
from decimal import Decimal
from typing import Any, TypedDict

from gotour.booking.domain.enum import BookingType, PaymentMethod
from gotour.booking.domain.factory import BookingFactory
from gotour.booking.domain.value_object import PartySize
from gotour.hotel.domain.entity import Hotel, HotelBooking, Room
from gotour.hotel.domain.value_object import StayPeriod
from gotour.shared.domain import IsoDateTime, UserId


class HotelBookingDetails(TypedDict, total=False):
    """ホテル予約の入力データ

    guests は件数または {"adults": n, "children": m}。
    """

    check_in_date: str
    check_out_date: str
    guests: Any
    total_price: Decimal | None
    price: Decimal | None
    payment_method: str | None
    special_requests: str | None


class HotelBookingFactory(BookingFactory):
    """ホテル予約情報を生成するFactory"""

    booking_type = BookingType.HOTEL

    def create(
        self, user_id: UserId, hotel: Hotel, room: Room, details: HotelBookingDetails
    ) -> HotelBooking:
        """新規予約のエンティティを作成する"""
        check_in = self._date(details.get("check_in_date"), "checkInDate")
        check_out = self._date(details.get("check_out_date"), "checkOutDate")
        try:
            stay_period = StayPeriod(check_in=check_in, check_out=check_out)
        except ValueError as e:
            raise self._validation_error(str(e)) from e

        party_size = PartySize.from_value(details.get("guests"))
        if party_size.total < 1:
            raise self._validation_error("At least one guest is required")

        payment_method = details.get("payment_method")
        return HotelBooking(
            **self._identity(),
            user_id=user_id,
            subject_id=hotel.id,
            subject=hotel.to_snapshot(),
            total_price=self._total_price(details.get("total_price"), details.get("price")),
            party_size=party_size,
            room_id=room.id,
            room=room.to_snapshot(),
            stay_period=stay_period,
            payment_method=PaymentMethod(payment_method) if payment_method else None,
            special_requests=details.get("special_requests"),
        )

    def _date(self, raw: object, field_name: str) -> date:
        parsed = IsoDateTime.parse(raw)
        if parsed is None:
            raise self._validation_error(f"{field_name} is required")
        return parsed.value.date()

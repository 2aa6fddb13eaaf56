from collections.abc import Mapping
from typing import Any

from gotour.booking.domain.enum import BookingType
from gotour.booking.domain.value_object import PartySize
from gotour.booking.infrastructure.item_mapper import (
    BookingItemMapper,
    from_iso,
    to_iso,
)
from gotour.shared.domain.exception import ValidationException
from gotour.tour.domain.entity import TourBooking


class TourBookingItemMapper(BookingItemMapper[TourBooking]):
    """ツアー予約アイテムの変換"""

    booking_type = BookingType.TOUR

    def specific_fields(self, booking: TourBooking) -> dict[str, Any]:
        subject = booking.subject
        images = subject.get("images") or []
        return {
            "tourName": subject.get("name"),
            "tourImage": images[0] if images else subject.get("coverImage"),
            "startDate": to_iso(booking.start_date),
            "endDate": to_iso(booking.end_date),
            "adults": booking.party_size.adults,
            "children": booking.party_size.children,
        }

    def build(self, item: Mapping[str, Any], common: dict[str, Any]) -> TourBooking:
        start_date = from_iso(item.get("startDate"))
        if start_date is None:
            raise ValidationException(
                f"Tour booking {item.get('_id')} has no start date",
                booking_type=self.booking_type.value,
            )
        guests = item.get("guests")
        party_size = PartySize.from_value(
            guests
            if guests is not None
            else {"adults": item.get("adults"), "children": item.get("children")}
        )
        return TourBooking(
            **common,
            party_size=party_size,
            start_date=start_date,
            end_date=from_iso(item.get("endDate")),
        )

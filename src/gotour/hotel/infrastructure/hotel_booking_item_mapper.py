from collections.abc import Mapping
from typing import Any

from gotour.booking.domain.enum import BookingType
from gotour.booking.domain.value_object import PartySize
from gotour.booking.infrastructure.item_mapper import BookingItemMapper, from_iso
from gotour.hotel.domain.entity import HotelBooking
from gotour.hotel.domain.value_object import StayPeriod
from gotour.shared.domain.exception import ValidationException


class HotelBookingItemMapper(BookingItemMapper[HotelBooking]):
    """ホテル予約アイテムの変換"""

    booking_type = BookingType.HOTEL

    def specific_fields(self, booking: HotelBooking) -> dict[str, Any]:
        subject = booking.subject
        images = subject.get("images") or []
        party_size = booking.party_size
        return {
            "hotelName": subject.get("name"),
            "hotelImage": images[0] if images else subject.get("coverImage"),
            "roomId": booking.room_id,
            "room": booking.room or None,
            "roomName": booking.room.get("name"),
            "checkInDate": booking.stay_period.check_in.isoformat(),
            "checkOutDate": booking.stay_period.check_out.isoformat(),
            "nights": booking.nights,
            "guests": party_size.to_dict() if party_size.children else party_size.adults,
        }

    def build(self, item: Mapping[str, Any], common: dict[str, Any]) -> HotelBooking:
        check_in = from_iso(item.get("checkInDate"))
        check_out = from_iso(item.get("checkOutDate"))
        if check_in is None or check_out is None:
            raise ValidationException(
                f"Hotel booking {item.get('_id')} has no stay period",
                booking_type=self.booking_type.value,
            )
        room = item.get("room")
        room_id = item.get("roomId") or (room.get("_id") if isinstance(room, Mapping) else room)
        return HotelBooking(
            **common,
            party_size=PartySize.from_value(item.get("guests")),
            room_id=str(room_id or ""),
            room=dict(room) if isinstance(room, Mapping) else None,
            stay_period=StayPeriod(check_in=check_in.date(), check_out=check_out.date()),
        )

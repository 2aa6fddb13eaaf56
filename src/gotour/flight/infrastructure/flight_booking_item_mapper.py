from collections.abc import Mapping
from typing import Any

from gotour.booking.domain.enum import BookingType
from gotour.booking.domain.value_object import PartySize
from gotour.booking.infrastructure.item_mapper import (
    BookingItemMapper,
    from_iso,
    to_iso,
)
from gotour.flight.domain.entity import FlightBooking
from gotour.flight.domain.enum import PassengerType
from gotour.flight.domain.value_object import ContactInfo, Passenger


class FlightBookingItemMapper(BookingItemMapper[FlightBooking]):
    """フライト予約アイテムの変換

    flightId には、旧クライアントとの互換のためフライト番号を保存する。
    """

    booking_type = BookingType.FLIGHT

    def specific_fields(self, booking: FlightBooking) -> dict[str, Any]:
        subject = booking.subject
        return {
            "flightId": booking.flight_code,
            "flightRef": booking.subject_id,
            "flightDate": booking.flight_date,
            "flightNumber": subject.get("flightNumber"),
            "airline": subject.get("airline"),
            "departureCity": subject.get("departureCity"),
            "arrivalCity": subject.get("arrivalCity"),
            "departureTime": to_iso(booking.departure_time),
            "passengers": [p.to_dict() for p in booking.passengers],
            "numOfPassengers": len(booking.passengers),
            "contactInfo": booking.contact_info.to_dict() if booking.contact_info else None,
        }

    def build(self, item: Mapping[str, Any], common: dict[str, Any]) -> FlightBooking:
        passengers = [Passenger.from_raw(p) for p in item.get("passengers") or []]
        adults = sum(1 for p in passengers if p.passenger_type == PassengerType.ADULT)
        raw_contact = item.get("contactInfo")
        common["subject_id"] = str(item.get("flightRef") or common["subject_id"])
        return FlightBooking(
            **common,
            party_size=PartySize(adults=adults, children=len(passengers) - adults),
            passengers=passengers,
            contact_info=ContactInfo.from_raw(raw_contact) if raw_contact else None,
            flight_code=item.get("flightId"),
            flight_date=item.get("flightDate"),
            departure_time=from_iso(item.get("departureTime")),
        )

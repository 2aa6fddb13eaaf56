from collections.abc import Mapping
from decimal import Decimal
from typing import Any, TypedDict

from gotour.booking.domain.enum import BookingType, PaymentMethod
from gotour.booking.domain.factory import BookingFactory
from gotour.booking.domain.value_object import PartySize
from gotour.flight.domain.entity import Flight, FlightBooking
from gotour.flight.domain.enum import PassengerType
from gotour.flight.domain.value_object import ContactInfo, Passenger
from gotour.shared.domain import UserId


class FlightBookingDetails(TypedDict, total=False):
    """フライト予約の入力データ"""

    flight_code: str | None
    flight_date: str | None
    passengers: list[Mapping[str, Any]]
    contact_info: Mapping[str, Any] | None
    total_price: Decimal | None
    price: Decimal | None
    payment_method: str | None
    special_requests: str | None


class FlightBookingFactory(BookingFactory):
    """フライト予約エンティティのファクトリ"""

    booking_type = BookingType.FLIGHT

    def create(
        self, user_id: UserId, flight: Flight, details: FlightBookingDetails
    ) -> FlightBooking:
        """新規フライト予約を生成する（搭乗者情報は正規化する）"""
        raw_passengers = details.get("passengers") or []
        if not raw_passengers:
            raise self._validation_error("At least one passenger is required")

        try:
            passengers = [Passenger.from_raw(raw) for raw in raw_passengers]
            raw_contact = details.get("contact_info")
            contact_info = ContactInfo.from_raw(raw_contact) if raw_contact else None
        except ValueError as e:
            raise self._validation_error(str(e)) from e

        adults = sum(1 for p in passengers if p.passenger_type == PassengerType.ADULT)
        payment_method = details.get("payment_method")
        return FlightBooking(
            **self._identity(),
            user_id=user_id,
            subject_id=flight.id,
            subject=flight.to_snapshot(),
            total_price=self._total_price(details.get("total_price"), details.get("price")),
            party_size=PartySize(adults=adults, children=len(passengers) - adults),
            passengers=passengers,
            contact_info=contact_info,
            flight_code=details.get("flight_code") or str(flight.flight_number),
            flight_date=details.get("flight_date"),
            departure_time=flight.departure_time,
            payment_method=PaymentMethod(payment_method) if payment_method else None,
            special_requests=details.get("special_requests"),
        )

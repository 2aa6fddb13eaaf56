import uuid
from collections.abc import Mapping
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import Any

from gotour.flight.domain.entity import Flight, SeatOffer
from gotour.flight.domain.enum import SeatClass
from gotour.flight.domain.value_object import FlightNumber
from gotour.shared.domain import IsoDateTime
from gotour.shared.utils import Clock, utc_now

UNKNOWN = "Unknown"
UNKNOWN_AIRLINE = "Unknown Airline"
DEFAULT_ECONOMY_PRICE = Decimal("2000000")
DEFAULT_BUSINESS_PRICE = Decimal("4000000")
DEFAULT_ECONOMY_SEATS = 30
DEFAULT_BUSINESS_SEATS = 10
DEFAULT_DURATION_HOURS = 2
DEFAULT_CHECKED_BAGGAGE_KG = 20
DEFAULT_CABIN_BAGGAGE_KG = 7


class FlightFactory:
    """外部のフライト情報からフライトを合成するファクトリ

    提供元が返さない項目は既定値で補う。数値として解釈できない項目があれば ValueError。
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock

    def from_provider(
        self, flight_number: FlightNumber, details: Mapping[str, Any]
    ) -> Flight:
        departure = _section(details, "departure")
        arrival = _section(details, "arrival")
        price = _section(details, "price")
        seats = _section(details, "seatsAvailable")
        duration = _section(details, "duration")

        hours = _to_int(duration.get("hours"), DEFAULT_DURATION_HOURS)
        minutes = _to_int(duration.get("minutes"), 0)

        departure_time = IsoDateTime.parse(departure.get("scheduled"))
        departure_at = departure_time.value if departure_time else self._clock()
        arrival_time = IsoDateTime.parse(arrival.get("scheduled"))
        arrival_at = (
            arrival_time.value
            if arrival_time
            else departure_at + timedelta(hours=hours, minutes=minutes)
        )

        economy_price = _to_decimal(price.get("economy"), DEFAULT_ECONOMY_PRICE)
        business_price = _to_decimal(price.get("business"), DEFAULT_BUSINESS_PRICE)

        return Flight(
            id=uuid.uuid4().hex,
            flight_number=flight_number,
            airline=_section(details, "airline").get("name") or UNKNOWN_AIRLINE,
            departure_airport=departure.get("iata") or UNKNOWN,
            departure_city=departure.get("city") or UNKNOWN,
            arrival_airport=arrival.get("iata") or UNKNOWN,
            arrival_city=arrival.get("city") or UNKNOWN,
            departure_time=departure_at,
            arrival_time=arrival_at,
            price=economy_price,
            status=details.get("flight_status") or "scheduled",
            aircraft=_section(details, "aircraft").get("model") or UNKNOWN,
            departure_terminal=departure.get("terminal") or UNKNOWN,
            arrival_terminal=arrival.get("terminal") or UNKNOWN,
            duration_hours=hours,
            duration_minutes=minutes,
            checked_baggage_kg=DEFAULT_CHECKED_BAGGAGE_KG,
            cabin_baggage_kg=DEFAULT_CABIN_BAGGAGE_KG,
            seat_offers=(
                SeatOffer(
                    seat_class=SeatClass.ECONOMY,
                    price=economy_price,
                    available_seats=_to_int(seats.get("economy"), DEFAULT_ECONOMY_SEATS),
                ),
                SeatOffer(
                    seat_class=SeatClass.BUSINESS,
                    price=business_price,
                    available_seats=_to_int(seats.get("business"), DEFAULT_BUSINESS_SEATS),
                ),
            ),
        )


def _section(details: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = details.get(key)
    return value if isinstance(value, Mapping) else {}


def _to_decimal(raw: object, default: Decimal) -> Decimal:
    """数値項目を Decimal に変換する。未設定・0 は既定値、解釈できない値は ValueError"""
    if raw is None or raw == "" or raw == 0:
        return default
    if isinstance(raw, bool):
        raise ValueError(f"Invalid number in flight data: {raw!r}")
    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid number in flight data: {raw!r}") from e
    if not value.is_finite():
        raise ValueError(f"Invalid number in flight data: {raw!r}")
    return value


def _to_int(raw: object, default: int) -> int:
    return int(_to_decimal(raw, Decimal(default)))

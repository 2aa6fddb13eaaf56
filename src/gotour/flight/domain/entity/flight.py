from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from gotour.flight.domain.enum import SeatClass
from gotour.flight.domain.value_object import FlightNumber


@dataclass(frozen=True)
class SeatOffer:
    """座席クラスごとの料金と空席数"""

    seat_class: SeatClass
    price: Decimal
    available_seats: int


@dataclass(frozen=True)
class Flight:
    """フライト

    カタログに登録済みのもの、または外部データから合成したもの。
    """

    id: str
    flight_number: FlightNumber
    airline: str
    departure_airport: str
    departure_city: str
    arrival_airport: str
    arrival_city: str
    departure_time: datetime
    arrival_time: datetime
    price: Decimal
    status: str = "scheduled"
    aircraft: str | None = None
    departure_terminal: str | None = None
    arrival_terminal: str | None = None
    duration_hours: int = 0
    duration_minutes: int = 0
    checked_baggage_kg: int = 0
    cabin_baggage_kg: int = 0
    seat_offers: tuple[SeatOffer, ...] = field(default_factory=tuple)
    image: str | None = None

    def price_for(self, seat_class: SeatClass) -> Decimal:
        """座席クラスの料金。設定がなければ基本料金"""
        for offer in self.seat_offers:
            if offer.seat_class == seat_class:
                return offer.price
        return self.price

    def to_snapshot(self) -> dict[str, Any]:
        """予約に埋め込むスナップショット"""
        return {
            "_id": self.id,
            "flightNumber": str(self.flight_number),
            "airline": self.airline,
            "departureAirport": self.departure_airport,
            "departureCity": self.departure_city,
            "arrivalAirport": self.arrival_airport,
            "arrivalCity": self.arrival_city,
            "departureTime": self.departure_time.isoformat(),
            "arrivalTime": self.arrival_time.isoformat(),
            "price": self.price,
            "image": self.image,
        }

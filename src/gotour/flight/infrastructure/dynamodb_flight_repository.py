import os
from decimal import Decimal
from typing import Any

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from gotour.booking.infrastructure.item_mapper import from_iso, to_dynamodb_value
from gotour.flight.domain.entity import Flight, SeatOffer
from gotour.flight.domain.enum import SeatClass
from gotour.flight.domain.repository import FlightRepository
from gotour.flight.domain.value_object import FlightNumber
from gotour.shared.domain.exception import DuplicateResourceException


class DynamoDBFlightRepository(FlightRepository):
    """DynamoDBを使用したFlightRepository の具象実装

    フライト: PK=FLIGHT#<id>, SK=META
    フライト番号での検索: GSI1（FLIGHT_NUMBER#<番号> / <出発時刻>）
    """

    def __init__(self, table_name: str | None = None, dynamodb: Any = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = dynamodb or boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, flight_id: str) -> Flight | None:
        """フライトIDで検索"""
        response = self.table.get_item(Key={"PK": f"FLIGHT#{flight_id}", "SK": "META"})
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_flight_number(self, flight_number: FlightNumber) -> Flight | None:
        """フライト番号で検索（出発時刻が最も遅い便）"""
        response = self.table.query(
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(f"FLIGHT_NUMBER#{flight_number}"),
            ScanIndexForward=False,
            Limit=1,
        )
        items = response.get("Items", [])
        if not items:
            return None
        return self._to_entity(items[0])

    def save(self, flight: Flight) -> Flight:
        """フライトをDBに保存する"""
        departure_time = flight.departure_time.isoformat()
        item = {
            "PK": f"FLIGHT#{flight.id}",
            "SK": "META",
            "entity_type": "FLIGHT",
            "GSI1PK": f"FLIGHT_NUMBER#{flight.flight_number}",
            "GSI1SK": departure_time,
            "_id": flight.id,
            "flightNumber": str(flight.flight_number),
            "airline": flight.airline,
            "departureAirport": flight.departure_airport,
            "departureCity": flight.departure_city,
            "arrivalAirport": flight.arrival_airport,
            "arrivalCity": flight.arrival_city,
            "departureTime": departure_time,
            "arrivalTime": flight.arrival_time.isoformat(),
            "status": flight.status,
            "aircraft": flight.aircraft,
            "price": flight.price,
            "seatClasses": [
                {
                    "name": offer.seat_class.value,
                    "price": offer.price,
                    "availableSeats": offer.available_seats,
                }
                for offer in flight.seat_offers
            ],
            "departureTerminal": flight.departure_terminal,
            "arrivalTerminal": flight.arrival_terminal,
            "flightDuration": {
                "hours": flight.duration_hours,
                "minutes": flight.duration_minutes,
            },
            "baggage": {
                "checkedBaggage": flight.checked_baggage_kg,
                "cabinBaggage": flight.cabin_baggage_kg,
            },
            "image": flight.image,
        }
        try:
            self.table.put_item(
                Item=to_dynamodb_value(item), ConditionExpression=Attr("PK").not_exists()
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Flight already exists: {flight.id}", booking_type="flight"
                ) from e
            raise
        return flight

    def _to_entity(self, item: dict) -> Flight:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        duration = item.get("flightDuration") or {}
        baggage = item.get("baggage") or {}
        departure_time = from_iso(item.get("departureTime"))
        arrival_time = from_iso(item.get("arrivalTime"))
        return Flight(
            id=str(item["_id"]),
            flight_number=FlightNumber(item["flightNumber"]),
            airline=item.get("airline", ""),
            departure_airport=item.get("departureAirport", ""),
            departure_city=item.get("departureCity", ""),
            arrival_airport=item.get("arrivalAirport", ""),
            arrival_city=item.get("arrivalCity", ""),
            departure_time=departure_time,
            arrival_time=arrival_time or departure_time,
            price=Decimal(str(item.get("price", 0))),
            status=item.get("status", "scheduled"),
            aircraft=item.get("aircraft"),
            departure_terminal=item.get("departureTerminal"),
            arrival_terminal=item.get("arrivalTerminal"),
            duration_hours=int(duration.get("hours", 0)),
            duration_minutes=int(duration.get("minutes", 0)),
            checked_baggage_kg=int(baggage.get("checkedBaggage", 0)),
            cabin_baggage_kg=int(baggage.get("cabinBaggage", 0)),
            seat_offers=tuple(
                SeatOffer(
                    seat_class=SeatClass(offer["name"]),
                    price=Decimal(str(offer.get("price", 0))),
                    available_seats=int(offer.get("availableSeats", 0)),
                )
                for offer in item.get("seatClasses") or []
            ),
            image=item.get("image"),
        )

from typing import Any

import boto3

from gotour.booking.domain.enum import BookingType
from gotour.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from gotour.flight.infrastructure.flight_booking_item_mapper import (
    FlightBookingItemMapper,
)
from gotour.hotel.infrastructure.hotel_booking_item_mapper import (
    HotelBookingItemMapper,
)
from gotour.tour.infrastructure.tour_booking_item_mapper import TourBookingItemMapper


def build_booking_repositories(
    table_name: str | None = None, dynamodb: Any = None
) -> dict[BookingType, DynamoDBBookingRepository]:
    """予約種別ごとのレポジトリを生成する（DynamoDB リソースは共有）"""
    dynamodb = dynamodb or boto3.resource("dynamodb")
    return {
        mapper.booking_type: DynamoDBBookingRepository(
            mapper, table_name=table_name, dynamodb=dynamodb
        )
        for mapper in (
            TourBookingItemMapper(),
            HotelBookingItemMapper(),
            FlightBookingItemMapper(),
        )
    }

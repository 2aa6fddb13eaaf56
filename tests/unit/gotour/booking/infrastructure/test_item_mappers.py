from datetime import datetime, timezone
from decimal import Decimal

import pytest

from gotour.booking.domain.enum import BookingStatus, BookingType, PaymentStatus
from gotour.booking.infrastructure.item_mapper import to_dynamodb_value
from gotour.flight.infrastructure.flight_booking_item_mapper import (
    FlightBookingItemMapper,
)
from gotour.hotel.infrastructure.hotel_booking_item_mapper import (
    HotelBookingItemMapper,
)
from gotour.shared.domain.exception import ValidationException
from gotour.tour.infrastructure.tour_booking_item_mapper import TourBookingItemMapper


class TestBookingItemMapper:
    def test_to_item_sets_keys_and_indexes(self, create_booking):
        booking = create_booking(booking_type=BookingType.TOUR)

        item = TourBookingItemMapper().to_item(booking)

        assert item["PK"] == "BOOKING#booking-1"
        assert item["SK"] == "META"
        assert item["entity_type"] == "TOUR_BOOKING"
        assert item["GSI1PK"] == "USER#user-1"
        assert item["GSI1SK"] == "TOUR#2024-06-01T09:00:00+00:00"
        assert item["GSI2PK"] == "TOUR_BOOKINGS"
        assert item["bookingType"] == "tour"
        assert item["tourId"] == "subject-1"
        assert item["totalPrice"] == Decimal("1500000")
        assert "cancellationReason" not in item

    def test_tour_round_trip(self, create_booking):
        mapper = TourBookingItemMapper()
        booking = create_booking(booking_type=BookingType.TOUR, status=BookingStatus.CONFIRMED)

        restored = mapper.to_entity(mapper.to_item(booking))

        assert restored.id == booking.id
        assert restored.user_id == booking.user_id
        assert restored.status == BookingStatus.CONFIRMED
        assert restored.party_size == booking.party_size
        assert restored.start_date == booking.start_date
        assert restored.end_date == booking.end_date
        assert restored.created_at == booking.created_at

    def test_hotel_round_trip(self, create_booking):
        mapper = HotelBookingItemMapper()
        booking = create_booking(
            booking_type=BookingType.HOTEL, payment_status=PaymentStatus.PAID
        )

        item = mapper.to_item(booking)
        restored = mapper.to_entity(item)

        assert item["nights"] == 2
        assert item["roomName"] == "Deluxe"
        assert item["guests"] == 2
        assert restored.room_id == "room-1"
        assert restored.stay_period == booking.stay_period
        assert restored.payment_status == PaymentStatus.PAID

    def test_flight_round_trip_keeps_flight_code(self, create_booking):
        mapper = FlightBookingItemMapper()
        booking = create_booking(booking_type=BookingType.FLIGHT)

        item = mapper.to_item(booking)
        restored = mapper.to_entity(item)

        assert item["flightId"] == "VN213"
        assert item["flightRef"] == "subject-1"
        assert item["numOfPassengers"] == 1
        assert restored.subject_id == "subject-1"
        assert restored.flight_code == "VN213"
        assert restored.passengers[0].last_name == "An"

    def test_legacy_item_with_price_and_user_id(self):
        """旧フィールド（price / userId / guests）を読み込める"""
        item = {
            "_id": "legacy-1",
            "userId": "user-9",
            "tour": {"_id": "t1", "name": "Sapa"},
            "price": 500000,
            "totalPrice": 0,
            "guests": {"adults": 2, "children": 1},
            "startDate": "2023-12-01",
            "createdAt": "2023-11-01T00:00:00Z",
        }

        booking = TourBookingItemMapper().to_entity(item)

        assert str(booking.user_id) == "user-9"
        assert booking.stored_updated_at is None
        assert booking.subject_id == "t1"
        assert booking.total_price.amount == Decimal("500000")
        assert booking.party_size.total == 3
        assert booking.status == BookingStatus.PENDING

    def test_stored_updated_at_keeps_raw_format(self):
        item = {
            "_id": "legacy-2",
            "user": "user-9",
            "tour": "t1",
            "totalPrice": 500000,
            "startDate": "2023-12-01",
            "createdAt": "2023-11-01T00:00:00.000Z",
            "updatedAt": "2023-11-02T08:30:00.000Z",
        }

        booking = TourBookingItemMapper().to_entity(item)

        assert booking.stored_updated_at == "2023-11-02T08:30:00.000Z"
        assert booking.updated_at == datetime(2023, 11, 2, 8, 30, tzinfo=timezone.utc)

    def test_item_without_owner_is_rejected(self):
        with pytest.raises(ValidationException):
            TourBookingItemMapper().to_entity(
                {"_id": "x", "tour": "t1", "startDate": "2024-01-01", "createdAt": "2024-01-01"}
            )


class TestToDynamoDBValue:
    def test_converts_floats_and_drops_none(self):
        value = to_dynamodb_value({"price": 1.5, "nested": {"a": None, "b": [2.0]}, "ok": True})

        assert value == {"price": Decimal("1.5"), "nested": {"b": [Decimal("2.0")]}, "ok": True}

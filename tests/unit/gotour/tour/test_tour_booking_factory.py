from datetime import datetime, timezone
from decimal import Decimal

import pytest

from gotour.booking.domain.enum import BookingStatus, PaymentMethod, PaymentStatus
from gotour.shared.domain import UserId
from gotour.shared.domain.exception import ValidationException
from gotour.tour.domain.entity import TourBooking

USER_ID = UserId(value="user-1")


class TestTourBookingFactory:
    def test_create_new_booking(self, factory, tour, now):
        booking = factory.create(
            USER_ID,
            tour,
            {
                "start_date": "2024-07-01",
                "adults": 2,
                "children": 1,
                "total_price": Decimal("10500000"),
                "payment_method": "momo",
            },
        )

        assert isinstance(booking, TourBooking)
        assert booking.status == BookingStatus.PENDING
        assert booking.payment_status == PaymentStatus.PENDING
        assert booking.payment_method == PaymentMethod.MOMO
        assert booking.subject_id == "tour-1"
        assert booking.subject["name"] == "Vịnh Hạ Long 3N2Đ"
        assert booking.party_size.total == 3
        assert booking.created_at == now
        assert str(booking.booking_reference).startswith("TOR-")
        assert str(booking.booking_number).startswith("TB")

    def test_end_date_defaults_to_start_plus_duration(self, factory, tour):
        booking = factory.create(
            USER_ID, tour, {"start_date": "2024-07-01", "adults": 1, "price": 3500000}
        )

        assert booking.end_date == datetime(2024, 7, 4, tzinfo=timezone.utc)

    def test_legacy_price_is_used_when_total_missing(self, factory, tour):
        booking = factory.create(
            USER_ID,
            tour,
            {"start_date": "2024-07-01", "adults": 1, "total_price": 0, "price": 500000},
        )

        assert booking.total_price.amount == Decimal("500000")

    def test_missing_price_is_rejected(self, factory, tour):
        with pytest.raises(ValidationException, match="totalPrice"):
            factory.create(USER_ID, tour, {"start_date": "2024-07-01", "adults": 1})

    def test_missing_start_date_is_rejected(self, factory, tour):
        with pytest.raises(ValidationException, match="startDate"):
            factory.create(USER_ID, tour, {"adults": 1, "total_price": Decimal("1")})

    def test_end_before_start_is_rejected(self, factory, tour):
        with pytest.raises(ValidationException):
            factory.create(
                USER_ID,
                tour,
                {
                    "start_date": "2024-07-05",
                    "end_date": "2024-07-01",
                    "adults": 1,
                    "total_price": Decimal("1"),
                },
            )

    def test_at_least_one_adult(self, factory, tour):
        with pytest.raises(ValidationException, match="adult"):
            factory.create(
                USER_ID,
                tour,
                {
                    "start_date": "2024-07-01",
                    "adults": 0,
                    "children": 2,
                    "total_price": Decimal("1"),
                },
            )

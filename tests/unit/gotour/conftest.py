from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from gotour.booking.domain.enum import BookingStatus, BookingType, PaymentStatus
from gotour.booking.domain.value_object import (
    BookingId,
    BookingNumber,
    BookingReference,
    PartySize,
)
from gotour.flight.domain.entity import FlightBooking
from gotour.flight.domain.value_object import Passenger
from gotour.hotel.domain.entity import HotelBooking
from gotour.hotel.domain.value_object import StayPeriod
from gotour.shared.domain import Actor, ActorRole, Money, UserId
from gotour.tour.domain.entity import TourBooking

CREATED_AT = datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)
NOW = datetime(2024, 6, 2, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """テスト共通の現在時刻"""
    return NOW


@pytest.fixture
def clock():
    """固定の現在時刻を返す Clock"""
    return lambda: NOW


@pytest.fixture
def owner():
    """予約の所有者（一般利用者）"""
    return Actor(user_id=UserId(value="user-1"), role=ActorRole.USER)


@pytest.fixture
def other_user():
    """所有者ではない一般利用者"""
    return Actor(user_id=UserId(value="user-2"), role=ActorRole.USER)


@pytest.fixture
def admin():
    """管理者"""
    return Actor(user_id=UserId(value="admin-1"), role=ActorRole.ADMIN)


@pytest.fixture
def mock_logger():
    """ロガーのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_booking():
    """予約エンティティを生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        booking_type: BookingType = BookingType.TOUR,
        status: BookingStatus = BookingStatus.PENDING,
        payment_status: PaymentStatus = PaymentStatus.PENDING,
        booking_id: str = "booking-1",
        user_id: str = "user-1",
        subject_id: str = "subject-1",
        total_price: Decimal = Decimal("1500000"),
        booking_reference: str | None = "TOR-ABC123",
        created_at: datetime = CREATED_AT,
        updated_at: datetime | None = None,
        cancellation_reason: str | None = None,
    ):
        common = {
            "id": BookingId(value=booking_id),
            "user_id": UserId(value=user_id),
            "subject_id": subject_id,
            "total_price": Money.vnd(total_price),
            "created_at": created_at,
            "updated_at": updated_at,
            "booking_reference": (
                BookingReference(value=booking_reference) if booking_reference else None
            ),
            "booking_number": BookingNumber(value="TB1234561234"),
            "status": status,
            "payment_status": payment_status,
            "cancellation_reason": cancellation_reason,
        }
        if booking_type == BookingType.TOUR:
            return TourBooking(
                **common,
                party_size=PartySize(adults=2, children=1),
                start_date=datetime(2024, 7, 1, tzinfo=timezone.utc),
                end_date=datetime(2024, 7, 4, tzinfo=timezone.utc),
            )
        if booking_type == BookingType.HOTEL:
            return HotelBooking(
                **common,
                party_size=PartySize(adults=2),
                room_id="room-1",
                room={"_id": "room-1", "name": "Deluxe"},
                stay_period=StayPeriod(
                    check_in=datetime(2024, 7, 1).date(),
                    check_out=datetime(2024, 7, 3).date(),
                ),
            )
        return FlightBooking(
            **common,
            party_size=PartySize(adults=1),
            passengers=[Passenger.from_raw({"fullName": "Nguyen Van An"})],
            flight_code="VN213",
            flight_date="2024-07-01",
        )

    return _factory


@pytest.fixture
def create_repository():
    """予約種別を持つリポジトリのモックを生成する Factory fixture"""

    def _factory(booking_type: BookingType = BookingType.TOUR, booking=None, records=None):
        repository = MagicMock()
        repository.booking_type = booking_type
        repository.find_by_id.return_value = booking
        repository.find.return_value = records or []
        repository.save.side_effect = lambda b, expected_updated_at=None: b
        return repository

    return _factory

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from gotour.hotel.domain.entity import Hotel, Room
from gotour.hotel.domain.factory import HotelBookingFactory


@pytest.fixture
def hotel():
    return Hotel(
        id="hotel-1",
        name="Khách sạn Sông Hàn",
        city="Đà Nẵng",
        cover_image="https://img/songhan.jpg",
    )


@pytest.fixture
def room():
    return Room(
        id="room-1",
        hotel_id="hotel-1",
        name="Deluxe",
        price=Decimal("1200000"),
        capacity=2,
    )


@pytest.fixture
def hotel_repository(hotel, room):
    """登録済みのホテルと客室を返すリポジトリのモック"""
    repository = MagicMock()
    repository.find_by_id.return_value = hotel
    repository.find_room.return_value = room
    return repository


@pytest.fixture
def factory(clock):
    return HotelBookingFactory(clock=clock)


@pytest.fixture
def create_details():
    """ホテル予約の入力データを生成する Factory fixture"""

    def _factory(**overrides):
        details = {
            "check_in_date": "2024-07-01",
            "check_out_date": "2024-07-03",
            "guests": 2,
            "total_price": Decimal("2400000"),
        }
        details.update(overrides)
        return details

    return _factory

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from gotour.flight.domain.entity import Flight
from gotour.flight.domain.factory import FlightBookingFactory, FlightFactory
from gotour.flight.domain.value_object import FlightNumber


@pytest.fixture
def flight():
    """登録済みのフライト"""
    return Flight(
        id="flight-1",
        flight_number=FlightNumber("VN213"),
        airline="Vietnam Airlines",
        departure_airport="HAN",
        departure_city="Hà Nội",
        arrival_airport="DAD",
        arrival_city="Đà Nẵng",
        departure_time=datetime(2024, 7, 1, 8, 0, tzinfo=timezone.utc),
        arrival_time=datetime(2024, 7, 1, 9, 20, tzinfo=timezone.utc),
        price=Decimal("1800000"),
    )


@pytest.fixture
def provider_details():
    """外部のフライト情報（aviationstack 形式）"""
    return {
        "flight_date": "2024-07-01",
        "flight_status": "scheduled",
        "departure": {
            "airport": "Noi Bai International",
            "iata": "HAN",
            "terminal": "1",
            "scheduled": "2024-07-01T08:00:00+00:00",
        },
        "arrival": {"airport": "Da Nang International", "iata": "DAD"},
        "airline": {"name": "Vietnam Airlines", "iata": "VN"},
        "flight": {"number": "213", "iata": "VN213"},
    }


@pytest.fixture
def flight_repository():
    """未登録のフライトを返すリポジトリのモック（save は引数をそのまま返す）"""
    repository = MagicMock()
    repository.find_by_id.return_value = None
    repository.find_by_flight_number.return_value = None
    repository.save.side_effect = lambda f: f
    return repository


@pytest.fixture
def flight_data_provider(provider_details):
    provider = MagicMock()
    provider.get_flight_details.return_value = provider_details
    return provider


@pytest.fixture
def flight_factory(clock):
    return FlightFactory(clock=clock)


@pytest.fixture
def factory(clock):
    return FlightBookingFactory(clock=clock)


@pytest.fixture
def create_details():
    """フライト予約の入力データを生成する Factory fixture"""

    def _factory(**overrides):
        details = {
            "flight_code": "VN213",
            "flight_date": "2024-07-01",
            "passengers": [{"fullName": "Nguyen Van An", "gender": "Male"}],
            "contact_info": {"email": "an@example.com", "phone": "0901234567"},
            "total_price": Decimal("2000000"),
        }
        details.update(overrides)
        return details

    return _factory

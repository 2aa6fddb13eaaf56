from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from gotour.tour.domain.entity import Tour
from gotour.tour.domain.factory import TourBookingFactory


@pytest.fixture
def tour():
    """3日間のツアー"""
    return Tour(
        id="tour-1",
        name="Vịnh Hạ Long 3N2Đ",
        price=Decimal("3500000"),
        duration=3,
        destination="Quảng Ninh",
        images=("https://img/halong-1.jpg", "https://img/halong-2.jpg"),
    )


@pytest.fixture
def tour_repository(tour):
    """登録済みツアーを返すリポジトリのモック"""
    repository = MagicMock()
    repository.find_by_id.return_value = tour
    return repository


@pytest.fixture
def factory(clock):
    return TourBookingFactory(clock=clock)

import pytest

from gotour.hotel.applications.reserve_hotel import ReserveHotelService
from gotour.hotel.domain.entity import HotelBooking
from gotour.shared.domain.exception import ForbiddenException, SubjectNotFoundException


@pytest.fixture
def booking_repository(create_repository):
    return create_repository()


@pytest.fixture
def service(booking_repository, hotel_repository, factory, mock_logger):
    return ReserveHotelService(
        repository=booking_repository,
        hotel_repository=hotel_repository,
        factory=factory,
        logger=mock_logger,
    )


class TestReserveHotelService:
    def test_reserve_creates_booking(self, service, booking_repository, owner, create_details):
        booking = service.reserve(owner, "hotel-1", "room-1", create_details())

        assert isinstance(booking, HotelBooking)
        assert booking.user_id == owner.user_id
        booking_repository.create.assert_called_once_with(booking)

    def test_admin_cannot_reserve(self, service, booking_repository, admin, create_details):
        with pytest.raises(ForbiddenException):
            service.reserve(admin, "hotel-1", "room-1", create_details())

        booking_repository.create.assert_not_called()

    def test_unknown_room(
        self, service, booking_repository, hotel_repository, owner, create_details
    ):
        hotel_repository.find_room.return_value = None

        with pytest.raises(SubjectNotFoundException) as exc_info:
            service.reserve(owner, "hotel-1", "missing", create_details())

        assert exc_info.value.booking_type == "hotel"
        booking_repository.create.assert_not_called()

    def test_unknown_hotel(
        self, service, booking_repository, hotel_repository, owner, create_details
    ):
        hotel_repository.find_by_id.return_value = None

        with pytest.raises(SubjectNotFoundException):
            service.reserve(owner, "missing", "room-1", create_details())

        hotel_repository.find_room.assert_not_called()
        booking_repository.create.assert_not_called()

from aws_lambda_powertools import Logger

from gotour.booking.domain.repository import BookingRepository
from gotour.hotel.domain.entity import HotelBooking
from gotour.hotel.domain.factory import HotelBookingDetails, HotelBookingFactory
from gotour.hotel.domain.repository import HotelRepository
from gotour.shared.domain import Actor
from gotour.shared.domain.exception import (
    ForbiddenException,
    SubjectNotFoundException,
)
from gotour.shared.utils import get_logger


class ReserveHotelService:
    """ホテル予約のユースケース"""

    def __init__(
        self,
        repository: BookingRepository,
        hotel_repository: HotelRepository,
        factory: HotelBookingFactory,
        logger: Logger | None = None,
    ) -> None:
        self._repository = repository
        self._hotel_repository = hotel_repository
        self._factory = factory
        self._logger = logger or get_logger("reserve-hotel")

    def reserve(
        self, actor: Actor, hotel_id: str, room_id: str, details: HotelBookingDetails
    ) -> HotelBooking:
        """ホテルを予約する"""
        if not actor.is_customer:
            raise ForbiddenException("Only users can create bookings", booking_type="hotel")

        hotel = self._hotel_repository.find_by_id(hotel_id)
        room = self._hotel_repository.find_room(hotel_id, room_id) if hotel else None
        if hotel is None or room is None:
            raise SubjectNotFoundException(
                f"Hotel or room not found: hotel={hotel_id}, room={room_id}",
                booking_type="hotel",
            )

        booking = self._factory.create(actor.user_id, hotel, room, details)
        self._repository.create(booking)
        self._logger.info(
            "Hotel booking created",
            extra={
                "booking_id": str(booking.id),
                "hotel_id": hotel_id,
                "room_id": room_id,
                "nights": booking.nights,
            },
        )
        return booking

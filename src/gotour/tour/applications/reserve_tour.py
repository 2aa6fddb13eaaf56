from aws_lambda_powertools import Logger

from gotour.booking.domain.repository import BookingRepository
from gotour.shared.domain import Actor
from gotour.shared.domain.exception import (
    ForbiddenException,
    SubjectNotFoundException,
)
from gotour.shared.utils import get_logger
from gotour.tour.domain.entity import TourBooking
from gotour.tour.domain.factory import TourBookingDetails, TourBookingFactory
from gotour.tour.domain.repository import TourRepository


class ReserveTourService:
    """ツアー予約のユースケース

    Factory と Repository を使用してエンティティの生成・永続化を行う。
    """

    def __init__(
        self,
        repository: BookingRepository,
        tour_repository: TourRepository,
        factory: TourBookingFactory,
        logger: Logger | None = None,
    ) -> None:
        self._repository = repository
        self._tour_repository = tour_repository
        self._factory = factory
        self._logger = logger or get_logger("reserve-tour")

    def reserve(
        self, actor: Actor, tour_id: str, details: TourBookingDetails
    ) -> TourBooking:
        """ツアーを予約する"""
        if not actor.is_customer:
            raise ForbiddenException("Only users can create bookings", booking_type="tour")

        tour = self._tour_repository.find_by_id(tour_id)
        if tour is None:
            raise SubjectNotFoundException(f"Tour not found: {tour_id}", booking_type="tour")

        booking = self._factory.create(actor.user_id, tour, details)
        self._repository.create(booking)
        self._logger.info(
            "Tour booking created",
            extra={
                "booking_id": str(booking.id),
                "tour_id": tour_id,
                "user_id": str(actor.user_id),
            },
        )
        return booking

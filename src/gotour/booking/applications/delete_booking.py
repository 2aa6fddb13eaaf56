from aws_lambda_powertools import Logger

from gotour.booking.applications.update_booking_status import load_booking
from gotour.booking.domain.repository import BookingRepository
from gotour.booking.domain.value_object import BookingId
from gotour.shared.domain import Actor
from gotour.shared.domain.exception import ForbiddenException
from gotour.shared.utils import get_logger


class DeleteBookingService:
    """予約削除サービス（管理者のみ・取り消し不可）"""

    def __init__(self, repository: BookingRepository, logger: Logger | None = None) -> None:
        self._repository = repository
        self._logger = logger or get_logger("delete-booking")

    def delete(self, booking_id: BookingId, actor: Actor) -> None:
        """予約を物理削除する"""
        booking_type = self._repository.booking_type.value
        if not actor.is_admin:
            raise ForbiddenException(
                "Only administrators can delete bookings", booking_type=booking_type
            )
        booking = load_booking(self._repository, booking_id)
        self._repository.remove(booking)
        self._logger.info(
            "Booking deleted",
            extra={
                "booking_id": str(booking_id),
                "booking_type": booking_type,
                "deleted_by": str(actor.user_id),
            },
        )

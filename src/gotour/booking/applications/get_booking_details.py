from aws_lambda_powertools import Logger

from gotour.booking.domain.enum import BookingType
from gotour.booking.domain.read_model import BookingView
from gotour.booking.domain.repository import BookingRepository
from gotour.booking.domain.service import BookingNormalizer, resolve_user_id
from gotour.booking.domain.value_object import BookingId, BookingReference
from gotour.shared.domain import Actor, UserId
from gotour.shared.domain.exception import (
    ForbiddenException,
    ResourceNotFoundException,
)
from gotour.shared.utils import get_logger


class GetBookingDetailsService:
    """予約詳細取得サービス

    所有者または管理者のみ参照できる。
    参照コードが未設定の旧データは、この時点で採番して保存する。
    """

    def __init__(self, repository: BookingRepository, logger: Logger | None = None) -> None:
        self._repository = repository
        self._logger = logger or get_logger("get-booking-details")
        self._normalizer = BookingNormalizer(
            reference_assigner=self._assign_reference, logger=self._logger
        )

    def get(self, booking_id: BookingId, actor: Actor) -> BookingView:
        booking_type = self._repository.booking_type
        record = self._repository.find_record(booking_id)
        if record is None:
            raise ResourceNotFoundException(
                f"Booking not found: {booking_id}", booking_type=booking_type.value
            )

        owner = resolve_user_id(record)
        if not actor.is_admin and not (owner and actor.owns(UserId(value=owner))):
            raise ForbiddenException(
                "Only the owner or an administrator can view this booking",
                booking_type=booking_type.value,
            )

        view = self._normalizer.normalize(record, booking_type)
        if view is None:
            raise ResourceNotFoundException(
                f"Booking not found: {booking_id}", booking_type=booking_type.value
            )
        return view

    def _assign_reference(self, booking_type: BookingType, booking_id: str) -> BookingReference:
        return self._repository.assign_reference(BookingId(value=booking_id))

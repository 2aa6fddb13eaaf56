from gotour.booking.applications.update_booking_status import load_booking
from gotour.booking.domain.entity import Booking
from gotour.booking.domain.repository import BookingRepository
from gotour.booking.domain.service import BookingStatusMachine
from gotour.booking.domain.value_object import BookingId
from gotour.shared.domain import Actor
from gotour.shared.domain.exception import ForbiddenException


class UpdatePaymentStatusService:
    """支払いステータス更新サービス（管理者・決済連携用）"""

    def __init__(
        self,
        repository: BookingRepository,
        status_machine: BookingStatusMachine | None = None,
    ) -> None:
        self._repository = repository
        self._status_machine = status_machine or BookingStatusMachine()

    def update(
        self, booking_id: BookingId, payment_status: object, actor: Actor
    ) -> Booking:
        """支払いステータスを変更して保存する"""
        if not actor.is_admin:
            raise ForbiddenException(
                "Only administrators can change payment status",
                booking_type=self._repository.booking_type.value,
            )
        booking = load_booking(self._repository, booking_id)
        self._status_machine.transition_payment_status(booking, payment_status)
        return self._repository.save(booking, optimistic_lock=True)

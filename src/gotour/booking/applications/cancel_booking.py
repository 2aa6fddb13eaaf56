from gotour.booking.applications.update_booking_status import load_booking
from gotour.booking.domain.entity import Booking
from gotour.booking.domain.repository import BookingRepository
from gotour.booking.domain.service import BookingStatusMachine
from gotour.booking.domain.value_object import BookingId
from gotour.shared.domain import Actor


class CancelBookingService:
    """予約キャンセルサービス（所有者・管理者用）"""

    def __init__(
        self,
        repository: BookingRepository,
        status_machine: BookingStatusMachine | None = None,
    ) -> None:
        self._repository = repository
        self._status_machine = status_machine or BookingStatusMachine()

    def cancel(
        self, booking_id: BookingId, actor: Actor, reason: str | None = None
    ) -> Booking:
        """予約をキャンセルして保存する"""
        booking = load_booking(self._repository, booking_id)
        self._status_machine.cancel(booking, actor, reason)
        return self._repository.save(booking, optimistic_lock=True)

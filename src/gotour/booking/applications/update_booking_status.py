from gotour.booking.domain.entity import Booking
from gotour.booking.domain.repository import BookingRepository
from gotour.booking.domain.service import BookingStatusMachine
from gotour.booking.domain.value_object import BookingId
from gotour.shared.domain import Actor
from gotour.shared.domain.exception import ResourceNotFoundException


def load_booking(repository: BookingRepository, booking_id: BookingId) -> Booking:
    """予約を取得する。存在しなければ ResourceNotFoundException"""
    booking = repository.find_by_id(booking_id)
    if booking is None:
        raise ResourceNotFoundException(
            f"Booking not found: {booking_id}",
            booking_type=repository.booking_type.value,
        )
    return booking


class UpdateBookingStatusService:
    """予約ステータス更新サービス（管理者用）"""

    def __init__(
        self,
        repository: BookingRepository,
        status_machine: BookingStatusMachine | None = None,
    ) -> None:
        self._repository = repository
        self._status_machine = status_machine or BookingStatusMachine()

    def update(self, booking_id: BookingId, status: object, actor: Actor) -> Booking:
        """予約ステータスを変更して保存する"""
        booking = load_booking(self._repository, booking_id)
        self._status_machine.transition_status(booking, status, actor)
        return self._repository.save(booking, optimistic_lock=True)

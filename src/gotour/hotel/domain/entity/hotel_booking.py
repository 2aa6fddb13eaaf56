from typing import Any

from gotour.booking.domain.entity import Booking
from gotour.booking.domain.enum import BookingType
from gotour.hotel.domain.value_object import StayPeriod
from gotour.shared.domain.exception import BusinessRuleViolationException


class HotelBooking(Booking):
    """ホテル予約エンティティ"""

    booking_type = BookingType.HOTEL

    def __init__(
        self,
        room_id: str,
        stay_period: StayPeriod,
        room: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        if not room_id:
            raise BusinessRuleViolationException(
                "Hotel booking must reference a room",
                booking_type=self.booking_type.value,
            )
        self._room_id = room_id
        self._room = dict(room or {})
        self._stay_period = stay_period

    @property
    def room_id(self) -> str:
        return self._room_id

    @property
    def room(self) -> dict[str, Any]:
        """客室のスナップショット"""
        return dict(self._room)

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def nights(self) -> int:
        return self._stay_period.nights()

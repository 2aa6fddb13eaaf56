from gotour.booking.domain.entity import Booking
from gotour.booking.domain.enum import BookingStatus, PaymentStatus
from gotour.shared.domain import Actor
from gotour.shared.domain.exception import (
    BusinessRuleViolationException,
    ForbiddenException,
)
from gotour.shared.utils import Clock, translate, utc_now


class BookingStatusMachine:
    """予約ステータス・支払いステータスの遷移を検証して適用する

    エンティティをメモリ上で変更するだけで、永続化は呼び出し側が行う。
    検証に失敗した場合、エンティティは変更されない。
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock

    def transition_status(
        self, booking: Booking, requested_status: object, actor: Actor
    ) -> Booking:
        """予約ステータスを遷移させる（管理者のみ）"""
        booking_type = booking.booking_type.value
        status = BookingStatus.parse(requested_status, booking_type=booking_type)

        if not actor.is_admin:
            raise ForbiddenException(
                "Only administrators can change booking status",
                booking_type=booking_type,
            )

        booking.change_status(status, self._clock())
        return booking

    def cancel(
        self, booking: Booking, actor: Actor, reason: str | None = None
    ) -> Booking:
        """予約をキャンセルする

        完了済みの予約は操作者に関わらずキャンセルできない。
        それ以外は所有者または管理者のみキャンセルできる。
        """
        booking_type = booking.booking_type.value

        if booking.status == BookingStatus.COMPLETED:
            raise BusinessRuleViolationException(
                "Cannot cancel a completed booking", booking_type=booking_type
            )
        if not actor.can_manage(booking.user_id):
            raise ForbiddenException(
                "Only the owner or an administrator can cancel this booking",
                booking_type=booking_type,
            )

        booking.cancel(reason or translate("cancellation.default_reason"), self._clock())
        return booking

    def transition_payment_status(
        self, booking: Booking, requested_payment_status: object
    ) -> Booking:
        """支払いステータスを遷移させる

        支払いステータス間の順序制約は設けない（refunded -> paid も許可）。
        """
        payment_status = PaymentStatus.parse(
            requested_payment_status, booking_type=booking.booking_type.value
        )
        booking.change_payment_status(payment_status, self._clock())
        return booking

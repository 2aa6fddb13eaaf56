from datetime import datetime
from typing import Any, ClassVar

from gotour.booking.domain.enum import (
    BookingStatus,
    BookingType,
    PaymentMethod,
    PaymentStatus,
)
from gotour.booking.domain.value_object import (
    BookingId,
    BookingNumber,
    BookingReference,
    PartySize,
)
from gotour.shared.domain import AggregateRoot, Money, UserId
from gotour.shared.domain.exception import (
    BusinessRuleViolationException,
    TerminalStateViolationException,
)


class Booking(AggregateRoot[BookingId]):
    """予約（ツアー・ホテル・フライト共通）

    - 所有者と予約対象は生成後に変更されない
    - 予約ステータスと支払いステータスは独立して遷移する
    - 参照コード・予約番号は一度だけ採番される
    """

    booking_type: ClassVar[BookingType]

    def __init__(
        self,
        id: BookingId,
        user_id: UserId,
        subject_id: str,
        total_price: Money,
        party_size: PartySize,
        created_at: datetime,
        updated_at: datetime | None = None,
        subject: dict[str, Any] | None = None,
        booking_reference: BookingReference | None = None,
        booking_number: BookingNumber | None = None,
        status: BookingStatus = BookingStatus.PENDING,
        payment_status: PaymentStatus = PaymentStatus.PENDING,
        payment_method: PaymentMethod | None = None,
        cancellation_reason: str | None = None,
        special_requests: str | None = None,
        stored_updated_at: Any = None,
    ) -> None:
        super().__init__(id, created_at, updated_at or created_at)

        if not subject_id:
            raise BusinessRuleViolationException(
                "Booking must reference a subject",
                booking_type=self.booking_type.value,
            )

        self._user_id = user_id
        self._subject_id = subject_id
        self._subject = dict(subject or {})
        self._total_price = total_price
        self._party_size = party_size
        self._booking_reference = booking_reference
        self._booking_number = booking_number
        self._status = status
        self._payment_status = payment_status
        self._payment_method = payment_method
        self._cancellation_reason = cancellation_reason
        self._special_requests = special_requests
        self._stored_updated_at = stored_updated_at

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def subject_id(self) -> str:
        return self._subject_id

    @property
    def subject(self) -> dict[str, Any]:
        """予約対象のスナップショット（部分的な場合がある）"""
        return dict(self._subject)

    @property
    def total_price(self) -> Money:
        return self._total_price

    @property
    def party_size(self) -> PartySize:
        return self._party_size

    @property
    def booking_reference(self) -> BookingReference | None:
        return self._booking_reference

    @property
    def booking_number(self) -> BookingNumber | None:
        return self._booking_number

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def payment_status(self) -> PaymentStatus:
        return self._payment_status

    @property
    def payment_method(self) -> PaymentMethod | None:
        return self._payment_method

    @property
    def cancellation_reason(self) -> str | None:
        return self._cancellation_reason

    @property
    def special_requests(self) -> str | None:
        return self._special_requests

    def change_status(self, status: BookingStatus, now: datetime) -> None:
        """予約ステータスを変更する

        COMPLETED からはいかなる遷移もできない。
        同じ値への変更は更新日時のみ進める。
        """
        if self._status == BookingStatus.COMPLETED:
            raise TerminalStateViolationException(
                f"Cannot change status of a completed booking to {status.value}",
                booking_type=self.booking_type.value,
            )
        self._status = status
        self.touch(now)

    def cancel(self, reason: str, now: datetime) -> None:
        """予約をキャンセルする"""
        if self._status == BookingStatus.COMPLETED:
            raise BusinessRuleViolationException(
                "Cannot cancel a completed booking",
                booking_type=self.booking_type.value,
            )
        if self._status == BookingStatus.CANCELLED:
            self.touch(now)
            return
        self._status = BookingStatus.CANCELLED
        self._cancellation_reason = reason
        self.touch(now)

    def change_payment_status(self, payment_status: PaymentStatus, now: datetime) -> None:
        """支払いステータスを変更する（遷移順序の制約はない）"""
        self._payment_status = payment_status
        self.touch(now)

    def assign_reference(self, reference: BookingReference) -> None:
        """参照コードを割り当てる。割り当て済みの場合は再割り当てできない"""
        if self._booking_reference is not None and self._booking_reference != reference:
            raise BusinessRuleViolationException(
                f"Booking reference is already assigned: {self._booking_reference}",
                booking_type=self.booking_type.value,
            )
        self._booking_reference = reference

    @property
    def stored_updated_at(self) -> Any:
        """保存済みアイテムの updatedAt（属性がない旧データ・未保存の場合は None）

        楽観ロックの条件には、エンティティの更新日時ではなくこの値をそのまま使う。
        """
        return self._stored_updated_at

    def mark_stored(self, stored_updated_at: Any) -> None:
        self._stored_updated_at = stored_updated_at

    @property
    def can_confirm(self) -> bool:
        """管理画面で「確定」操作を出せるかどうか"""
        return self._status == BookingStatus.PENDING

    @property
    def can_cancel(self) -> bool:
        """管理画面で「キャンセル」操作を出せるかどうか"""
        return self._status not in (BookingStatus.CANCELLED, BookingStatus.COMPLETED)

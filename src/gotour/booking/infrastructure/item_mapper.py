from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Generic, TypeVar

from gotour.booking.domain.entity import Booking
from gotour.booking.domain.enum import (
    BookingStatus,
    BookingType,
    PaymentMethod,
    PaymentStatus,
)
from gotour.booking.domain.service import (
    resolve_subject_id,
    resolve_total_price,
    resolve_user_id,
)
from gotour.booking.domain.value_object import (
    BookingId,
    BookingNumber,
    BookingReference,
)
from gotour.shared.domain import Currency, IsoDateTime, Money, UserId
from gotour.shared.domain.exception import ValidationException

B = TypeVar("B", bound=Booking)


def booking_key(booking_id: BookingId | str) -> dict[str, str]:
    """予約アイテムの主キー"""
    return {"PK": f"BOOKING#{booking_id}", "SK": "META"}


def to_iso(value: datetime | None) -> str | None:
    """DynamoDB に保存する日時文字列（UTC の ISO 8601）"""
    if value is None:
        return None
    return str(IsoDateTime(value=value))


def from_iso(raw: object) -> datetime | None:
    parsed = IsoDateTime.parse(raw)
    return parsed.value if parsed else None


def to_dynamodb_value(value: Any) -> Any:
    """DynamoDB が受け付ける型に変換する（float は Decimal に）"""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, datetime):
        return to_iso(value)
    if isinstance(value, Mapping):
        return {k: to_dynamodb_value(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [to_dynamodb_value(v) for v in value]
    return value


class BookingItemMapper(ABC, Generic[B]):
    """予約エンティティと DynamoDB アイテムの相互変換

    共通フィールドはこの基底クラスで扱い、種別固有のフィールドは
    サブクラスが specific_fields / build で扱う。
    フィールド名は Web・モバイルクライアントと共有するドキュメント形式に合わせる。
    """

    booking_type: ClassVar[BookingType]

    def to_item(self, booking: B) -> dict[str, Any]:
        """エンティティを DynamoDB アイテムに変換する"""
        booking_type = self.booking_type
        subject_key = booking_type.subject_key
        created_at = to_iso(booking.created_at)

        item: dict[str, Any] = {
            **booking_key(booking.id),
            "entity_type": booking_type.entity_type,
            "GSI1PK": f"USER#{booking.user_id}",
            "GSI1SK": f"{booking_type.name}#{created_at}",
            "GSI2PK": f"{booking_type.name}_BOOKINGS",
            "GSI2SK": created_at,
            "_id": str(booking.id),
            "bookingType": booking_type.value,
            "user": str(booking.user_id),
            f"{subject_key}Id": booking.subject_id,
            subject_key: booking.subject or None,
            "totalPrice": booking.total_price.amount,
            "currency": str(booking.total_price.currency),
            "status": booking.status.value,
            "paymentStatus": booking.payment_status.value,
            "paymentMethod": booking.payment_method.value if booking.payment_method else None,
            "bookingReference": _str_or_none(booking.booking_reference),
            "bookingNumber": _str_or_none(booking.booking_number),
            "cancellationReason": booking.cancellation_reason,
            "specialRequests": booking.special_requests,
            "createdAt": created_at,
            "updatedAt": to_iso(booking.updated_at),
        }
        item.update(self.specific_fields(booking))
        return to_dynamodb_value(item)

    def to_entity(self, item: Mapping[str, Any]) -> B:
        """DynamoDB アイテムをエンティティに変換する"""
        subject_key = self.booking_type.subject_key
        subject = item.get(subject_key)
        created_at = from_iso(item.get("createdAt"))
        owner = resolve_user_id(item)
        if created_at is None or owner is None:
            raise ValidationException(
                f"Booking {item.get('_id')} has no owner or creation date",
                booking_type=self.booking_type.value,
            )

        common = {
            "id": BookingId(value=str(item["_id"])),
            "user_id": UserId(value=owner),
            "subject_id": resolve_subject_id(item, self.booking_type) or "",
            "subject": dict(subject) if isinstance(subject, Mapping) else None,
            "total_price": Money(
                amount=resolve_total_price(item),
                currency=Currency(str(item.get("currency") or "VND")),
            ),
            "created_at": created_at,
            "updated_at": from_iso(item.get("updatedAt")),
            "booking_reference": _optional(BookingReference, item.get("bookingReference")),
            "booking_number": _optional(BookingNumber, item.get("bookingNumber")),
            "status": BookingStatus(item.get("status") or BookingStatus.PENDING.value),
            "payment_status": PaymentStatus(
                item.get("paymentStatus") or PaymentStatus.PENDING.value
            ),
            "payment_method": (
                PaymentMethod(item["paymentMethod"]) if item.get("paymentMethod") else None
            ),
            "cancellation_reason": item.get("cancellationReason"),
            "special_requests": item.get("specialRequests"),
            "stored_updated_at": item.get("updatedAt"),
        }
        return self.build(item, common)

    @abstractmethod
    def specific_fields(self, booking: B) -> dict[str, Any]:
        """種別固有のフィールド"""
        raise NotImplementedError

    @abstractmethod
    def build(self, item: Mapping[str, Any], common: dict[str, Any]) -> B:
        """共通フィールドと種別固有のフィールドからエンティティを生成する"""
        raise NotImplementedError


def _str_or_none(value: object) -> str | None:
    return str(value) if value is not None else None


def _optional(factory: type, raw: object) -> Any:
    return factory(value=str(raw)) if raw else None

import os
from typing import Any

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from gotour.booking.domain.entity import Booking
from gotour.booking.domain.repository import BookingQuery, BookingRepository
from gotour.booking.domain.value_object import BookingId, BookingReference
from gotour.booking.infrastructure.item_mapper import (
    BookingItemMapper,
    booking_key,
    to_iso,
)
from gotour.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)

MAX_REFERENCE_ATTEMPTS = 5


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装（予約種別ごと）

    参照コード・予約番号の一意性は、予約アイテムと同じトランザクションで
    書き込むガードアイテム（REFERENCE#... / NUMBER#...）で担保する。
    """

    def __init__(
        self,
        mapper: BookingItemMapper,
        table_name: str | None = None,
        dynamodb: Any = None,
    ) -> None:
        self.booking_type = mapper.booking_type
        self._mapper = mapper
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = dynamodb or boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find(self, query: BookingQuery) -> list[dict[str, Any]]:
        """条件に一致する予約ドキュメントを作成日時の降順で返す

        利用者指定あり: GSI1（USER#<id> / <TYPE>#<createdAt>）
        利用者指定なし: GSI2（<TYPE>_BOOKINGS / <createdAt>）
        """
        prefix = f"{self.booking_type.name}#"
        if query.user_id:
            index_name = "GSI1"
            key_condition = Key("GSI1PK").eq(f"USER#{query.user_id}")
            sort_key = Key("GSI1SK")
        else:
            index_name = "GSI2"
            key_condition = Key("GSI2PK").eq(f"{self.booking_type.name}_BOOKINGS")
            sort_key = Key("GSI2SK")
            prefix = ""

        lower = f"{prefix}{to_iso(query.from_date)}" if query.from_date else None
        upper = f"{prefix}{to_iso(query.to_date)}" if query.to_date else None
        if lower and upper:
            key_condition = key_condition & sort_key.between(lower, upper)
        elif lower:
            key_condition = key_condition & sort_key.gte(lower)
        elif upper:
            key_condition = key_condition & sort_key.lte(upper)
        elif prefix:
            key_condition = key_condition & sort_key.begins_with(prefix)

        kwargs: dict[str, Any] = {
            "IndexName": index_name,
            "KeyConditionExpression": key_condition,
            "ScanIndexForward": False,
        }
        if query.status is not None:
            kwargs["FilterExpression"] = Attr("status").eq(query.status.value)

        items: list[dict[str, Any]] = []
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return items
            kwargs["ExclusiveStartKey"] = last_key

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        item = self.find_record(booking_id)
        if item is None:
            return None
        return self._mapper.to_entity(item)

    def find_record(self, booking_id: BookingId) -> dict[str, Any] | None:
        """予約IDで生ドキュメントを検索（他の種別の予約は返さない）"""
        response = self.table.get_item(Key=booking_key(booking_id), ConsistentRead=True)
        item = response.get("Item")
        if not item or item.get("entity_type") != self.booking_type.entity_type:
            return None
        return item

    def create(self, booking: Booking) -> Booking:
        """予約とガードアイテムを1トランザクションで書き込む"""
        item = self._mapper.to_item(booking)
        transact_items = [
            {
                "Put": {
                    "TableName": self.table_name,
                    "Item": item,
                    "ConditionExpression": "attribute_not_exists(PK)",
                }
            }
        ]
        transact_items.extend(
            {
                "Put": {
                    "TableName": self.table_name,
                    "Item": guard,
                    "ConditionExpression": "attribute_not_exists(PK)",
                }
            }
            for guard in self._guard_items(booking)
        )

        try:
            self.dynamodb.meta.client.transact_write_items(TransactItems=transact_items)
        except ClientError as e:
            if e.response["Error"]["Code"] == "TransactionCanceledException":
                raise DuplicateResourceException(
                    f"Booking already exists or its reference/number is taken: {booking.id}",
                    booking_type=self.booking_type.value,
                ) from e
            raise
        booking.mark_stored(item["updatedAt"])
        return booking

    def save(self, booking: Booking, optimistic_lock: bool = False) -> Booking:
        """予約を上書き保存する

        楽観ロックでは読み込み時の updatedAt の生の値（"...000Z" 形式のまま）と比較する。
        updatedAt を持たない旧データは、属性が未設定のままであることを条件にする。
        """
        condition = Attr("PK").exists()
        if optimistic_lock:
            stored = booking.stored_updated_at
            if stored is None:
                condition = condition & Attr("updatedAt").not_exists()
            else:
                condition = condition & Attr("updatedAt").eq(stored)

        item = self._mapper.to_item(booking)
        try:
            self.table.put_item(Item=item, ConditionExpression=condition)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                if not optimistic_lock:
                    raise ResourceNotFoundException(
                        f"Booking not found: {booking.id}",
                        booking_type=self.booking_type.value,
                    ) from e
                raise OptimisticLockException(
                    f"Booking was modified concurrently: "
                    f"expected updatedAt {booking.stored_updated_at}, "
                    f"booking_id={booking.id}",
                    booking_type=self.booking_type.value,
                ) from e
            raise
        booking.mark_stored(item["updatedAt"])
        return booking

    def remove(self, booking: Booking) -> None:
        """予約とガードアイテムを削除する"""
        transact_items: list[dict[str, Any]] = [
            {
                "Delete": {
                    "TableName": self.table_name,
                    "Key": booking_key(booking.id),
                    "ConditionExpression": "attribute_exists(PK)",
                }
            }
        ]
        transact_items.extend(
            {
                "Delete": {
                    "TableName": self.table_name,
                    "Key": {"PK": guard["PK"], "SK": guard["SK"]},
                }
            }
            for guard in self._guard_items(booking)
        )

        try:
            self.dynamodb.meta.client.transact_write_items(TransactItems=transact_items)
        except ClientError as e:
            if e.response["Error"]["Code"] == "TransactionCanceledException":
                raise ResourceNotFoundException(
                    f"Booking not found: {booking.id}",
                    booking_type=self.booking_type.value,
                ) from e
            raise

    def assign_reference(self, booking_id: BookingId) -> BookingReference:
        """参照コードを採番して書き戻す

        ガードアイテムの衝突時は採番し直す。
        他のリクエストが先に採番していた場合はその値を返す。
        """
        for _ in range(MAX_REFERENCE_ATTEMPTS):
            reference = BookingReference.generate(self.booking_type)
            try:
                self.dynamodb.meta.client.transact_write_items(
                    TransactItems=[
                        {
                            "Put": {
                                "TableName": self.table_name,
                                "Item": self._reference_guard(booking_id, reference),
                                "ConditionExpression": "attribute_not_exists(PK)",
                            }
                        },
                        {
                            "Update": {
                                "TableName": self.table_name,
                                "Key": booking_key(booking_id),
                                "UpdateExpression": "SET bookingReference = :reference",
                                "ConditionExpression": (
                                    "attribute_exists(PK) "
                                    "AND attribute_not_exists(bookingReference)"
                                ),
                                "ExpressionAttributeValues": {":reference": str(reference)},
                            }
                        },
                    ]
                )
                return reference
            except ClientError as e:
                if e.response["Error"]["Code"] != "TransactionCanceledException":
                    raise
                if _failed_at(e, 1):
                    return self._existing_reference(booking_id)

        raise DuplicateResourceException(
            f"Could not allocate a unique booking reference: {booking_id}",
            booking_type=self.booking_type.value,
        )

    def _existing_reference(self, booking_id: BookingId) -> BookingReference:
        record = self.find_record(booking_id)
        if record is None:
            raise ResourceNotFoundException(
                f"Booking not found: {booking_id}", booking_type=self.booking_type.value
            )
        if not record.get("bookingReference"):
            raise OptimisticLockException(
                f"Booking reference could not be assigned: {booking_id}",
                booking_type=self.booking_type.value,
            )
        return BookingReference(value=str(record["bookingReference"]))

    def _guard_items(self, booking: Booking) -> list[dict[str, Any]]:
        guards = []
        if booking.booking_reference is not None:
            guards.append(self._reference_guard(booking.id, booking.booking_reference))
        if booking.booking_number is not None:
            guards.append(
                {
                    "PK": f"NUMBER#{booking.booking_number}",
                    "SK": "META",
                    "entity_type": "BOOKING_NUMBER",
                    "booking_id": str(booking.id),
                    "booking_type": self.booking_type.value,
                }
            )
        return guards

    def _reference_guard(
        self, booking_id: BookingId, reference: BookingReference
    ) -> dict[str, Any]:
        return {
            "PK": f"REFERENCE#{reference}",
            "SK": "META",
            "entity_type": "BOOKING_REFERENCE",
            "booking_id": str(booking_id),
            "booking_type": self.booking_type.value,
        }


def _failed_at(error: ClientError, index: int) -> bool:
    """トランザクションの index 番目の操作が条件チェックで失敗したかどうか"""
    reasons = error.response.get("CancellationReasons") or []
    return len(reasons) > index and reasons[index].get("Code") == "ConditionalCheckFailed"

from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from gotour.booking.domain.entity import Booking
from gotour.booking.domain.enum import BookingStatus, BookingType
from gotour.booking.domain.value_object import BookingId, BookingReference
from gotour.shared.domain import Repository


@dataclass(frozen=True)
class BookingQuery:
    """予約ドキュメントの検索条件（すべて任意）"""

    user_id: str | None = None
    status: BookingStatus | None = None
    from_date: datetime | None = None
    to_date: datetime | None = None


class BookingRepository(Repository[Booking, BookingId]):
    """予約レポジトリ（予約種別ごとに1つ）

    一覧取得は正規化前の生ドキュメントを返す。
    旧データは項目が欠けている場合があるため、エンティティへの復元は
    find_by_id で個別に行う。
    """

    booking_type: BookingType

    @abstractmethod
    def find(self, query: BookingQuery) -> list[dict[str, Any]]:
        """条件に一致する予約ドキュメントを返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_record(self, booking_id: BookingId) -> dict[str, Any] | None:
        """予約IDで生ドキュメントを検索"""
        raise NotImplementedError

    @abstractmethod
    def create(self, booking: Booking) -> Booking:
        """新規予約を永続化する

        参照コード・予約番号の重複は DuplicateResourceException。
        """
        raise NotImplementedError

    @abstractmethod
    def save(self, booking: Booking, optimistic_lock: bool = False) -> Booking:
        """既存の予約を更新する

        optimistic_lock が True の場合、読み込み時の updatedAt（booking.stored_updated_at）
        から保存済みの値が変わっていれば OptimisticLockException。
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, booking: Booking) -> None:
        """予約を物理削除する"""
        raise NotImplementedError

    @abstractmethod
    def assign_reference(self, booking_id: BookingId) -> BookingReference:
        """参照コード未設定の予約に採番して永続化する

        すでに設定済みの場合はその値を返す。
        """
        raise NotImplementedError

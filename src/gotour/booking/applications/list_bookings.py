import math
from dataclasses import dataclass
from datetime import datetime

from aws_lambda_powertools import Logger

from gotour.booking.domain.enum import BookingStatus
from gotour.booking.domain.read_model import BookingView
from gotour.booking.domain.repository import BookingQuery, BookingRepository
from gotour.booking.domain.service import BookingNormalizer
from gotour.shared.domain import Actor
from gotour.shared.domain.exception import ForbiddenException, ValidationException
from gotour.shared.utils import get_logger


@dataclass(frozen=True)
class BookingPage:
    """ページング済みの予約一覧"""

    items: list[BookingView]
    total: int
    current_page: int
    limit: int

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.total else 0


class ListBookingsService:
    """予約一覧取得サービス（管理者用）

    ステータス・作成日時の範囲で絞り込み、作成日時の降順でページングする。
    """

    def __init__(self, repository: BookingRepository, logger: Logger | None = None) -> None:
        self._repository = repository
        self._logger = logger or get_logger("list-bookings")
        self._normalizer = BookingNormalizer(logger=self._logger)

    def list(
        self,
        actor: Actor,
        page: int = 1,
        limit: int = 10,
        status: BookingStatus | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
    ) -> BookingPage:
        booking_type = self._repository.booking_type.value
        if not actor.is_admin:
            raise ForbiddenException(
                "Only administrators can list all bookings", booking_type=booking_type
            )
        if page < 1 or limit < 1:
            raise ValidationException(
                "page and limit must be positive", booking_type=booking_type
            )

        records = self._repository.find(
            BookingQuery(status=status, from_date=from_date, to_date=to_date)
        )
        views = [
            view
            for view in (
                self._normalizer.normalize(record, self._repository.booking_type)
                for record in records
            )
            if view is not None
        ]
        views.sort(key=lambda v: v.sort_key(), reverse=True)

        start = (page - 1) * limit
        return BookingPage(
            items=views[start : start + limit],
            total=len(views),
            current_page=page,
            limit=limit,
        )

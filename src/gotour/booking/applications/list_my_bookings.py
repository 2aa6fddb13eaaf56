"""利用者の予約一覧（ツアー・ホテル・フライトの横断取得）"""

from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from aws_lambda_powertools import Logger

from gotour.booking.domain.enum import BookingFilter, BookingType
from gotour.booking.domain.read_model import BookingView
from gotour.booking.domain.repository import BookingQuery, BookingRepository
from gotour.booking.domain.service import BookingNormalizer
from gotour.booking.domain.value_object import BookingId, BookingReference
from gotour.shared.domain import UserId
from gotour.shared.utils import RetryPolicy, get_logger


class ListMyBookingsService:
    """利用者の予約を種別横断で取得する

    - 種別ごとの取得は並行して実行し、すべての完了を待つ
    - 各取得は独立しており、失敗した種別はログを残して空として扱う
    - ホテルの取得のみ1回だけ再試行する
    - 結果は正規化し、作成日時の降順で返す
    """

    def __init__(
        self,
        repositories: Mapping[BookingType, BookingRepository],
        retry_policies: Mapping[BookingType, RetryPolicy] | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._repositories = dict(repositories)
        self._logger = logger or get_logger("list-my-bookings")
        self._retry_policies = dict(
            retry_policies
            if retry_policies is not None
            else {BookingType.HOTEL: RetryPolicy.retry_once(self._logger)}
        )
        self._normalizer = BookingNormalizer(
            reference_assigner=self._assign_reference, logger=self._logger
        )

    def list(
        self, user_id: UserId, booking_filter: BookingFilter = BookingFilter.ALL
    ) -> list[BookingView]:
        booking_types = [t for t in self._repositories if booking_filter.includes(t)]
        query = BookingQuery(user_id=str(user_id))

        with ThreadPoolExecutor(max_workers=max(len(booking_types), 1)) as executor:
            futures = {
                booking_type: executor.submit(self._fetch, booking_type, query)
                for booking_type in booking_types
            }
            results = {booking_type: f.result() for booking_type, f in futures.items()}

        views: list[BookingView] = []
        for booking_type in booking_types:
            for record in results[booking_type]:
                view = self._normalizer.normalize(record, booking_type)
                if view is not None and booking_filter.includes(view.booking_type):
                    views.append(view)

        return sorted(views, key=lambda v: v.sort_key(), reverse=True)

    def _fetch(self, booking_type: BookingType, query: BookingQuery) -> list[dict[str, Any]]:
        """1種別分を取得する。失敗時は空リスト"""
        repository = self._repositories[booking_type]
        policy = self._retry_policies.get(booking_type, RetryPolicy.no_retry())
        try:
            return policy.run(
                lambda: repository.find(query), name=f"fetch_{booking_type.value}_bookings"
            )
        except Exception:
            self._logger.exception(
                "Failed to fetch bookings",
                extra={"booking_type": booking_type.value, "user_id": query.user_id},
            )
            return []

    def _assign_reference(self, booking_type: BookingType, booking_id: str) -> BookingReference:
        return self._repositories[booking_type].assign_reference(BookingId(value=booking_id))

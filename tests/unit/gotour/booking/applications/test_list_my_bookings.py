import pytest

from gotour.booking.applications.list_my_bookings import ListMyBookingsService
from gotour.booking.domain.enum import BookingFilter, BookingType
from gotour.booking.domain.value_object import BookingReference
from gotour.shared.domain import UserId

USER_ID = UserId(value="user-1")


@pytest.fixture
def repositories(create_repository):
    """種別ごとのリポジトリのモック"""
    return {booking_type: create_repository(booking_type) for booking_type in BookingType}


def _record(booking_id: str, created_at: str | None = None, **fields) -> dict:
    record = {"_id": booking_id, "user": "user-1", "bookingReference": "REF-000001", **fields}
    if created_at is not None:
        record["createdAt"] = created_at
    return record


class TestListMyBookingsService:
    def test_merges_all_types_newest_first(self, repositories, mock_logger):
        """作成日時の降順、作成日時がないものは最後"""
        repositories[BookingType.TOUR].find.return_value = [
            _record("tour-old", "2024-01-01T00:00:00Z", bookingType="tour")
        ]
        repositories[BookingType.HOTEL].find.return_value = [
            _record("hotel-new", "2024-06-01T00:00:00Z", bookingType="hotel")
        ]
        repositories[BookingType.FLIGHT].find.return_value = [
            _record("flight-undated", bookingType="flight")
        ]
        service = ListMyBookingsService(repositories, logger=mock_logger)

        views = service.list(USER_ID)

        assert [v.id for v in views] == ["hotel-new", "tour-old", "flight-undated"]

    def test_queries_each_repository_by_user(self, repositories, mock_logger):
        service = ListMyBookingsService(repositories, logger=mock_logger)

        service.list(USER_ID)

        for repository in repositories.values():
            query = repository.find.call_args[0][0]
            assert query.user_id == "user-1"

    def test_failed_type_does_not_hide_others(self, repositories, mock_logger):
        """1種別の取得に失敗しても、他の種別の結果は返す"""
        repositories[BookingType.TOUR].find.return_value = [
            _record("tour-1", "2024-01-01T00:00:00Z", bookingType="tour")
        ]
        repositories[BookingType.HOTEL].find.return_value = [
            _record("hotel-1", "2024-02-01T00:00:00Z", bookingType="hotel")
        ]
        repositories[BookingType.FLIGHT].find.side_effect = RuntimeError("flight table down")
        service = ListMyBookingsService(repositories, logger=mock_logger)

        views = service.list(USER_ID)

        assert [v.id for v in views] == ["hotel-1", "tour-1"]
        mock_logger.exception.assert_called_once()

    def test_hotel_fetch_is_retried_once(self, repositories, mock_logger):
        repositories[BookingType.HOTEL].find.side_effect = [
            RuntimeError("timeout"),
            [_record("hotel-1", "2024-02-01T00:00:00Z", bookingType="hotel")],
        ]
        service = ListMyBookingsService(repositories, logger=mock_logger)

        views = service.list(USER_ID, BookingFilter.HOTEL)

        assert [v.id for v in views] == ["hotel-1"]
        assert repositories[BookingType.HOTEL].find.call_count == 2
        mock_logger.exception.assert_not_called()

    def test_tour_fetch_is_not_retried(self, repositories, mock_logger):
        repositories[BookingType.TOUR].find.side_effect = RuntimeError("timeout")
        service = ListMyBookingsService(repositories, logger=mock_logger)

        views = service.list(USER_ID, BookingFilter.TOUR)

        assert views == []
        repositories[BookingType.TOUR].find.assert_called_once()

    def test_filter_queries_only_selected_type(self, repositories, mock_logger):
        repositories[BookingType.FLIGHT].find.return_value = [
            _record("flight-1", "2024-02-01T00:00:00Z", bookingType="flight")
        ]
        service = ListMyBookingsService(repositories, logger=mock_logger)

        views = service.list(USER_ID, BookingFilter.FLIGHT)

        assert [v.booking_type for v in views] == [BookingType.FLIGHT]
        repositories[BookingType.TOUR].find.assert_not_called()
        repositories[BookingType.HOTEL].find.assert_not_called()

    def test_filter_drops_records_of_other_persisted_type(self, repositories, mock_logger):
        """取得元と異なる bookingType が永続化されたドキュメントは種別で絞り込む"""
        repositories[BookingType.TOUR].find.return_value = [
            _record("tour-1", "2024-02-01T00:00:00Z"),
            _record("mislabeled", "2024-03-01T00:00:00Z", bookingType="hotel"),
        ]
        service = ListMyBookingsService(repositories, logger=mock_logger)

        views = service.list(USER_ID, BookingFilter.TOUR)

        assert [v.id for v in views] == ["tour-1"]

    def test_legacy_records_take_type_from_source(self, repositories, mock_logger):
        repositories[BookingType.FLIGHT].find.return_value = [
            _record("legacy", "2024-02-01T00:00:00Z", passengers=[{"firstName": "An"}])
        ]
        service = ListMyBookingsService(repositories, logger=mock_logger)

        views = service.list(USER_ID)

        assert views[0].booking_type == BookingType.FLIGHT
        assert views[0].guest_count == 1

    def test_missing_reference_is_backfilled_by_source_repository(
        self, repositories, mock_logger
    ):
        record = _record("tour-1", "2024-02-01T00:00:00Z", bookingType="tour")
        del record["bookingReference"]
        repositories[BookingType.TOUR].find.return_value = [record]
        repositories[BookingType.TOUR].assign_reference.return_value = BookingReference(
            value="TOR-NEW001"
        )
        service = ListMyBookingsService(repositories, logger=mock_logger)

        views = service.list(USER_ID)

        assert views[0].booking_reference == "TOR-NEW001"
        repositories[BookingType.HOTEL].assign_reference.assert_not_called()

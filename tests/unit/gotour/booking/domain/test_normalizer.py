from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from gotour.booking.domain.enum import BookingStatus, BookingType
from gotour.booking.domain.service import (
    PLACEHOLDER_IMAGES,
    BookingNormalizer,
    resolve_booking_type,
    resolve_duration,
    resolve_guest_count,
    resolve_image,
    resolve_name,
    resolve_subject_id,
    resolve_total_price,
)
from gotour.booking.domain.value_object import BookingReference


@pytest.fixture
def normalizer(mock_logger):
    return BookingNormalizer(logger=mock_logger)


@pytest.fixture(autouse=True)
def english_locale(monkeypatch):
    monkeypatch.setenv("GOTOUR_LOCALE", "en")


class TestResolveBookingType:
    def test_persisted_type_wins(self):
        record = {"bookingType": "hotel", "tour": {"_id": "t1"}}

        assert resolve_booking_type(record, BookingType.TOUR) == BookingType.HOTEL

    def test_source_hint_used_when_not_persisted(self):
        assert resolve_booking_type({"tour": "t1"}, BookingType.FLIGHT) == BookingType.FLIGHT

    @pytest.mark.parametrize(
        ("record", "expected"),
        [
            ({"tour": {"_id": "t1"}}, BookingType.TOUR),
            ({"tourId": "t1"}, BookingType.TOUR),
            ({"flightId": "VN213"}, BookingType.FLIGHT),
            ({"hotel": "h1"}, BookingType.HOTEL),
            ({}, BookingType.HOTEL),
        ],
    )
    def test_legacy_records_are_inferred(self, record, expected):
        """bookingType を持たない旧データは予約対象のフィールドから推定する"""
        assert resolve_booking_type(record) == expected


class TestResolveFields:
    def test_total_price_falls_back_to_legacy_price(self):
        assert resolve_total_price({"totalPrice": 0, "price": 500000}) == Decimal("500000")

    def test_total_price_defaults_to_zero(self):
        assert resolve_total_price({}) == Decimal("0")

    def test_subject_id_from_embedded_subject(self):
        record = {"tour": {"_id": "t1", "name": "Hạ Long"}, "tourId": "ignored"}

        assert resolve_subject_id(record, BookingType.TOUR) == "t1"

    def test_subject_id_from_string_reference(self):
        assert resolve_subject_id({"hotel": "h1"}, BookingType.HOTEL) == "h1"

    def test_image_falls_back_to_denormalized_field(self):
        record = {"tour": "t1", "tourImage": "https://img/x.jpg"}

        assert resolve_image(record, BookingType.TOUR) == "https://img/x.jpg"

    def test_image_prefers_first_subject_image(self):
        record = {"tour": {"images": ["https://img/a.jpg"], "coverImage": "https://img/c.jpg"}}

        assert resolve_image(record, BookingType.TOUR) == "https://img/a.jpg"

    @pytest.mark.parametrize("booking_type", list(BookingType))
    def test_image_placeholder(self, booking_type):
        assert resolve_image({}, booking_type) == PLACEHOLDER_IMAGES[booking_type]

    def test_name_placeholder(self):
        assert resolve_name({}, BookingType.HOTEL) == "Unknown hotel"

    def test_flight_name_is_route_with_number(self):
        record = {
            "flight": {"departureCity": "Hà Nội", "arrivalCity": "Đà Nẵng"},
            "flightNumber": "VN213",
        }

        assert resolve_name(record, BookingType.FLIGHT) == "Hà Nội - Đà Nẵng (VN213)"

    def test_duration_from_explicit_value(self):
        assert resolve_duration({"duration": 5}, BookingType.TOUR) == 5

    def test_duration_rounds_partial_day_up(self):
        record = {"startDate": "2024-07-01T00:00:00Z", "endDate": "2024-07-03T06:00:00Z"}

        assert resolve_duration(record, BookingType.TOUR) == 3

    def test_nights_from_check_in_and_out(self):
        record = {"checkInDate": "2024-07-01", "checkOutDate": "2024-07-03"}

        assert resolve_duration(record, BookingType.HOTEL) == 2

    def test_duration_falls_back_to_subject(self):
        assert resolve_duration({"tour": {"duration": 4}}, BookingType.TOUR) == 4

    def test_flight_has_no_duration(self):
        record = {"flight": {"departureTime": "2024-07-01T08:00:00Z"}, "duration": 3}

        assert resolve_duration(record, BookingType.FLIGHT) == 0

    @pytest.mark.parametrize(
        ("record", "expected"),
        [
            ({"guests": 3}, 3),
            ({"guests": {"adults": 2, "children": 1}}, 3),
            ({"adults": 2, "children": 2}, 4),
            ({}, 0),
        ],
    )
    def test_guest_count(self, record, expected):
        assert resolve_guest_count(record, BookingType.TOUR) == expected

    def test_flight_guest_count_from_passengers(self):
        record = {
            "passengers": [{"firstName": "An"}, {"firstName": "Bình"}],
            "numOfPassengers": 5,
        }

        assert resolve_guest_count(record, BookingType.FLIGHT) == 2

    def test_flight_guest_count_from_legacy_count(self):
        assert resolve_guest_count({"numOfPassengers": 3}, BookingType.FLIGHT) == 3


class TestBookingNormalizer:
    def test_legacy_tour_record(self, normalizer):
        """旧データ（IDのみ・totalPrice=0）を既定値で補完する"""
        record = {
            "_id": "b1",
            "tour": "t1",
            "tourName": "Hạ Long 3N2Đ",
            "tourImage": "https://img/halong.jpg",
            "totalPrice": 0,
            "price": 500000,
            "status": "confirmed",
            "startDate": "2024-07-01",
            "endDate": "2024-07-04",
            "bookingReference": "TOR-AAAAAA",
            "createdAt": "2024-06-01T09:00:00Z",
        }

        view = normalizer.normalize(record)

        assert view.booking_type == BookingType.TOUR
        assert view.name == "Hạ Long 3N2Đ"
        assert view.image == "https://img/halong.jpg"
        assert view.total_price == Decimal("500000")
        assert view.formatted_price == "500.000đ"
        assert view.duration == 3
        assert view.start_display == "01/07/2024"
        assert view.status == BookingStatus.CONFIRMED
        assert view.can_cancel

    def test_unparseable_dates_render_not_available(self, normalizer):
        view = normalizer.normalize(
            {"_id": "b1", "tour": "t1", "startDate": "soon", "endDate": None}
        )

        assert view.start_display == "N/A"
        assert view.end_display == "N/A"

    def test_record_without_id_is_dropped(self, normalizer, mock_logger):
        assert normalizer.normalize({"tour": "t1"}) is None
        mock_logger.warning.assert_called_once()

    def test_unknown_status_is_kept_as_unknown(self, normalizer):
        view = normalizer.normalize({"_id": "b1", "hotel": "h1", "status": "archived"})

        assert view.status is None
        assert view.status_label == "Unknown"

    def test_missing_status_is_pending(self, normalizer):
        view = normalizer.normalize({"_id": "b1", "hotel": "h1"})

        assert view.status == BookingStatus.PENDING
        assert view.can_confirm

    def test_hotel_room_name_placeholder(self, normalizer):
        view = normalizer.normalize({"_id": "b1", "hotel": "h1"})

        assert view.room_name == "Standard room"

    def test_hotel_room_name_from_room_type(self, normalizer):
        view = normalizer.normalize(
            {"_id": "b1", "hotel": "h1", "roomType": {"name": "Deluxe"}}
        )

        assert view.room_name == "Deluxe"

    def test_flight_record(self, normalizer):
        record = {
            "_id": "b1",
            "bookingType": "flight",
            "flight": {
                "departureCity": "Hà Nội",
                "arrivalCity": "TP HCM",
                "flightNumber": "VJ122",
                "airline": "VietJet Air",
                "departureTime": "2024-07-01T08:30:00Z",
            },
            "passengers": [{"firstName": "An"}],
        }

        view = normalizer.normalize(record)

        assert view.name == "Hà Nội - TP HCM (VJ122)"
        assert view.airline == "VietJet Air"
        assert view.start_display == "08:30 - 01/07/2024"
        assert view.duration == 0
        assert view.guest_count == 1

    def test_missing_reference_is_backfilled(self, mock_logger):
        assigner = MagicMock(return_value=BookingReference(value="HTL-NEW001"))
        normalizer = BookingNormalizer(reference_assigner=assigner, logger=mock_logger)

        view = normalizer.normalize({"_id": "b1", "hotel": "h1"}, BookingType.HOTEL)

        assert view.booking_reference == "HTL-NEW001"
        assigner.assert_called_once_with(BookingType.HOTEL, "b1")

    def test_existing_reference_is_not_backfilled(self, mock_logger):
        assigner = MagicMock()
        normalizer = BookingNormalizer(reference_assigner=assigner, logger=mock_logger)

        view = normalizer.normalize({"_id": "b1", "hotel": "h1", "bookingReference": "HTL-OLD001"})

        assert view.booking_reference == "HTL-OLD001"
        assigner.assert_not_called()

    def test_backfill_failure_does_not_fail_normalization(self, mock_logger):
        """採番に失敗してもビューは生成する"""
        assigner = MagicMock(side_effect=RuntimeError("dynamodb down"))
        normalizer = BookingNormalizer(reference_assigner=assigner, logger=mock_logger)

        view = normalizer.normalize({"_id": "b1", "hotel": "h1"})

        assert view is not None
        assert view.booking_reference is None
        mock_logger.exception.assert_called_once()

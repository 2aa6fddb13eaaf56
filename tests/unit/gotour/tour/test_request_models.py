from decimal import Decimal

import pytest
from pydantic import ValidationError

from gotour.booking.domain.enum import PaymentMethod
from gotour.tour.handlers.request_models import ReserveTourRequest


class TestReserveTourRequest:
    def test_camel_case_body(self):
        request = ReserveTourRequest.model_validate(
            {
                "tourId": "tour-1",
                "startDate": "2024-07-01",
                "adults": 2,
                "totalPrice": "4500000",
                "paymentMethod": "bank_transfer",
            }
        )

        assert request.tour_id == "tour-1"
        assert request.total_price == Decimal("4500000")
        assert request.payment_method == PaymentMethod.BANK_TRANSFER
        assert request.end_date is None

    def test_adults_defaults_to_one(self):
        request = ReserveTourRequest.model_validate({"tourId": "t1", "startDate": "2024-07-01"})

        assert request.adults == 1
        assert request.children == 0

    def test_tour_id_is_required(self):
        with pytest.raises(ValidationError):
            ReserveTourRequest.model_validate({"startDate": "2024-07-01"})

    def test_negative_price_is_rejected(self):
        with pytest.raises(ValidationError):
            ReserveTourRequest.model_validate(
                {"tourId": "t1", "startDate": "2024-07-01", "totalPrice": -1}
            )

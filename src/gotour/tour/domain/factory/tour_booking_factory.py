from datetime import timedelta
from decimal import Decimal
from typing import TypedDict

from gotour.booking.domain.enum import BookingType, PaymentMethod
from gotour.booking.domain.factory import BookingFactory
from gotour.booking.domain.value_object import PartySize
from gotour.shared.domain import IsoDateTime, UserId
from gotour.tour.domain.entity import Tour, TourBooking


class TourBookingDetails(TypedDict, total=False):
    """ツアー予約の入力データ"""

    start_date: str
    end_date: str | None
    adults: int
    children: int
    total_price: Decimal | None
    price: Decimal | None
    payment_method: str | None
    special_requests: str | None


class TourBookingFactory(BookingFactory):
    """ツアー予約エンティティのファクトリ"""

    booking_type = BookingType.TOUR

    def create(
        self, user_id: UserId, tour: Tour, details: TourBookingDetails
    ) -> TourBooking:
        """新規ツアー予約を生成する

        終了日が指定されていなければ、開始日にツアー日数を加えた日とする。
        """
        start = IsoDateTime.parse(details.get("start_date"))
        if start is None:
            raise self._validation_error("startDate is required")

        end = IsoDateTime.parse(details.get("end_date"))
        end_date = end.value if end else None
        if end_date is None and tour.duration > 0:
            end_date = start.value + timedelta(days=tour.duration)

        try:
            party_size = PartySize(
                adults=details.get("adults") or 0, children=details.get("children") or 0
            )
        except ValueError as e:
            raise self._validation_error(str(e)) from e
        if party_size.adults < 1:
            raise self._validation_error("At least one adult is required")

        payment_method = details.get("payment_method")
        return TourBooking(
            **self._identity(),
            user_id=user_id,
            subject_id=tour.id,
            subject=tour.to_snapshot(),
            total_price=self._total_price(details.get("total_price"), details.get("price")),
            party_size=party_size,
            start_date=start.value,
            end_date=end_date,
            payment_method=PaymentMethod(payment_method) if payment_method else None,
            special_requests=details.get("special_requests"),
        )

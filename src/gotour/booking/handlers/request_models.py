from datetime import date, datetime, time, timezone

from pydantic import AliasChoices, BaseModel, Field, field_validator

from gotour.booking.domain.enum import BookingFilter, BookingStatus, BookingType


class BookingTypePathParameters(BaseModel):
    """予約種別のパスパラメータ"""

    booking_type: BookingType = Field(..., description="予約種別", examples=["tour"])


class BookingPathParameters(BookingTypePathParameters):
    """予約を特定するパスパラメータ"""

    booking_id: str = Field(..., min_length=1, description="予約ID")


class UpdateStatusRequest(BaseModel):
    """予約ステータス更新リクエスト（値の検証はドメイン側で行う）"""

    status: str = Field(..., min_length=1, examples=["confirmed"])


class CancelBookingRequest(BaseModel):
    """予約キャンセルリクエスト"""

    reason: str | None = Field(
        default=None,
        max_length=500,
        validation_alias=AliasChoices("reason", "cancellationReason"),
        description="キャンセル理由（省略時は既定の文言）",
    )


class UpdatePaymentStatusRequest(BaseModel):
    """支払いステータス更新リクエスト"""

    payment_status: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("paymentStatus", "payment_status"),
        examples=["paid"],
    )


class ListMyBookingsQuery(BaseModel):
    """利用者の予約一覧のクエリパラメータ"""

    type: BookingFilter = Field(default=BookingFilter.ALL, examples=["all", "tour"])


class ListBookingsQuery(BaseModel):
    """予約一覧（管理者用）のクエリパラメータ"""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    status: BookingStatus | None = None
    from_date: datetime | None = Field(
        default=None, validation_alias=AliasChoices("fromDate", "from_date")
    )
    to_date: datetime | None = Field(
        default=None, validation_alias=AliasChoices("toDate", "to_date")
    )

    @field_validator("status", mode="before")
    @classmethod
    def empty_status_to_none(cls, v):
        """空文字は絞り込みなし"""
        return v or None

    @field_validator("from_date", mode="before")
    @classmethod
    def start_of_day(cls, v):
        """日付のみの指定はその日の 00:00（UTC）"""
        return _date_only(v, time.min) or v

    @field_validator("to_date", mode="before")
    @classmethod
    def end_of_day(cls, v):
        """日付のみの指定はその日の終わり（UTC）"""
        return _date_only(v, time.max) or v


def _date_only(v: object, at: time) -> datetime | None:
    if isinstance(v, str) and len(v) == 10:
        try:
            day = date.fromisoformat(v)
        except ValueError:
            return None
        return datetime.combine(day, at, tzinfo=timezone.utc)
    return None

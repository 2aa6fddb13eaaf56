from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from gotour.booking.domain.enum import PaymentMethod
from gotour.shared.utils import to_optional_decimal


class ReserveTourRequest(BaseModel):
    """ツアー予約リクエストスキーマ"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "tourId": "tour-123",
                    "startDate": "2024-07-01",
                    "adults": 2,
                    "children": 1,
                    "totalPrice": 4500000,
                    "paymentMethod": "momo",
                }
            ]
        },
    )

    tour_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("tourId", "tour_id"),
        description="ツアーID",
    )
    start_date: str = Field(
        ...,
        validation_alias=AliasChoices("startDate", "start_date"),
        description="開始日（ISO 8601形式）",
        examples=["2024-07-01"],
    )
    end_date: str | None = Field(
        default=None,
        validation_alias=AliasChoices("endDate", "end_date"),
        description="終了日（省略時は開始日 + ツアー日数）",
    )
    adults: int = Field(default=1, ge=1, description="大人の人数")
    children: int = Field(default=0, ge=0, description="子供の人数")
    total_price: Decimal | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("totalPrice", "total_price"),
        description="合計金額（VND）",
    )
    price: Decimal | None = Field(default=None, ge=0, description="旧クライアントの金額")
    payment_method: PaymentMethod | None = Field(
        default=None, validation_alias=AliasChoices("paymentMethod", "payment_method")
    )
    special_requests: str | None = Field(
        default=None,
        max_length=1000,
        validation_alias=AliasChoices("specialRequests", "special_requests"),
    )

    @field_validator("total_price", "price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        """Decimalに変換する"""
        return to_optional_decimal(v)

from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from gotour.booking.domain.enum import PaymentMethod
from gotour.shared.utils import to_optional_decimal


class GuestsRequest(BaseModel):
    """人数の内訳"""

    adults: int = Field(default=1, ge=0)
    children: int = Field(default=0, ge=0)


class ReserveHotelRequest(BaseModel):
    """ホテル予約リクエストスキーマ"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "hotelId": "hotel-123",
                    "roomId": "room-1",
                    "checkInDate": "2024-07-01",
                    "checkOutDate": "2024-07-03",
                    "guests": {"adults": 2, "children": 0},
                    "totalPrice": 3000000,
                }
            ]
        },
    )

    hotel_id: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("hotelId", "hotel_id")
    )
    room_id: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("roomId", "room_id")
    )
    check_in_date: str = Field(
        ...,
        validation_alias=AliasChoices("checkInDate", "check_in_date"),
        description="チェックイン日（ISO 8601形式）",
    )
    check_out_date: str = Field(
        ...,
        validation_alias=AliasChoices("checkOutDate", "check_out_date"),
        description="チェックアウト日（ISO 8601形式）",
    )
    guests: int | GuestsRequest = Field(default=1, description="人数または内訳")
    total_price: Decimal | None = Field(
        default=None, ge=0, validation_alias=AliasChoices("totalPrice", "total_price")
    )
    price: Decimal | None = Field(default=None, ge=0)
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

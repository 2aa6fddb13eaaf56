from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from gotour.booking.domain.enum import PaymentMethod
from gotour.flight.domain.enum import Gender, PassengerType, SeatClass, Title
from gotour.shared.utils import to_optional_decimal


class PassengerRequest(BaseModel):
    """搭乗者の入力スキーマ（正規化はドメイン側で行う）"""

    model_config = ConfigDict(populate_by_name=True)

    type: PassengerType = PassengerType.ADULT
    title: Title | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    full_name: str | None = Field(default=None, alias="fullName")
    dob: str | None = None
    gender: Gender | None = None
    nationality: str | None = None
    identification: str | None = None
    passport_number: str | None = Field(default=None, alias="passportNumber")
    passport_expiry: str | None = Field(default=None, alias="passportExpiry")
    seat_class: SeatClass = Field(default=SeatClass.ECONOMY, alias="seatClass")


class ContactInfoRequest(BaseModel):
    """連絡先の入力スキーマ"""

    model_config = ConfigDict(populate_by_name=True)

    full_name: str | None = Field(default=None, alias="fullName")
    email: str = Field(..., min_length=3)
    phone: str = Field(..., min_length=6)
    identification: str | None = None


class ReserveFlightRequest(BaseModel):
    """フライト予約リクエストスキーマ"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "flightId": "VN213",
                    "flightDate": "2024-07-01",
                    "passengers": [{"fullName": "Nguyen Van An", "gender": "Male"}],
                    "contactInfo": {"email": "an@example.com", "phone": "0901234567"},
                    "totalPrice": 2000000,
                }
            ]
        },
    )

    flight: str | None = Field(default=None, description="登録済みフライトのID")
    flight_code: str | None = Field(
        default=None,
        validation_alias=AliasChoices("flightId", "flight_code", "flightNumber"),
        description="フライト番号",
        examples=["VN213"],
    )
    flight_date: str | None = Field(
        default=None,
        validation_alias=AliasChoices("flightDate", "flight_date"),
        description="搭乗日（YYYY-MM-DD）",
    )
    passengers: list[PassengerRequest] = Field(..., min_length=1)
    contact_info: ContactInfoRequest | None = Field(
        default=None, validation_alias=AliasChoices("contactInfo", "contact_info")
    )
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

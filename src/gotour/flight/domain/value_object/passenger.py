from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from gotour.flight.domain.enum import Gender, PassengerType, SeatClass, Title
from gotour.shared.domain import IsoDateTime

DEFAULT_NATIONALITY = "Vietnamese"
UNNAMED = "Unnamed"


@dataclass(frozen=True)
class Passenger:
    """搭乗者"""

    first_name: str
    title: Title
    nationality: str
    last_name: str = ""
    full_name: str | None = None
    passenger_type: PassengerType = PassengerType.ADULT
    dob: date | None = None
    gender: Gender | None = None
    identification: str | None = None
    passport_number: str | None = None
    passport_expiry: date | None = None
    seat_class: SeatClass = SeatClass.ECONOMY

    def __post_init__(self) -> None:
        if not self.first_name.strip():
            raise ValueError("Passenger first name cannot be empty")

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> Passenger:
        """クライアントの入力を正規化して生成する

        - fullName のみの場合、最後の単語を lastName、残りを firstName とする
        - firstName が空なら fullName、それもなければ "Unnamed"
        - title 未指定なら Female は Ms、それ以外は Mr
        - nationality 未指定なら Vietnamese
        """
        full_name = (raw.get("fullName") or "").strip()
        first_name = (raw.get("firstName") or "").strip()
        last_name = (raw.get("lastName") or "").strip()

        if full_name and (not first_name or not last_name):
            parts = full_name.split()
            if len(parts) > 1:
                last_name = parts[-1]
                first_name = " ".join(parts[:-1])
            else:
                first_name = full_name
                last_name = ""

        if not first_name:
            first_name = full_name or UNNAMED

        gender = Gender(raw["gender"]) if raw.get("gender") else None
        if raw.get("title"):
            title = Title(raw["title"])
        else:
            title = Title.MS if gender == Gender.FEMALE else Title.MR

        return cls(
            first_name=first_name,
            last_name=last_name,
            full_name=full_name or None,
            title=title,
            nationality=raw.get("nationality") or DEFAULT_NATIONALITY,
            passenger_type=PassengerType(raw.get("type") or PassengerType.ADULT.value),
            dob=_to_date(raw.get("dob")),
            gender=gender,
            identification=raw.get("identification"),
            passport_number=raw.get("passportNumber"),
            passport_expiry=_to_date(raw.get("passportExpiry")),
            seat_class=SeatClass(raw.get("seatClass") or SeatClass.ECONOMY.value),
        )

    def to_dict(self) -> dict[str, Any]:
        """ドキュメント形式（camelCase）"""
        return {
            "type": self.passenger_type.value,
            "title": self.title.value,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "fullName": self.full_name,
            "dob": self.dob.isoformat() if self.dob else None,
            "gender": self.gender.value if self.gender else None,
            "nationality": self.nationality,
            "identification": self.identification,
            "passportNumber": self.passport_number,
            "passportExpiry": self.passport_expiry.isoformat() if self.passport_expiry else None,
            "seatClass": self.seat_class.value,
        }


@dataclass(frozen=True)
class ContactInfo:
    """予約の連絡先"""

    email: str
    phone: str
    full_name: str | None = None
    identification: str | None = None

    def __post_init__(self) -> None:
        if not self.email or not self.phone:
            raise ValueError("Contact email and phone are required")

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> ContactInfo:
        return cls(
            email=str(raw.get("email") or ""),
            phone=str(raw.get("phone") or ""),
            full_name=raw.get("fullName"),
            identification=raw.get("identification"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "fullName": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "identification": self.identification,
        }


def _to_date(raw: object) -> date | None:
    parsed = IsoDateTime.parse(raw)
    return parsed.value.date() if parsed else None

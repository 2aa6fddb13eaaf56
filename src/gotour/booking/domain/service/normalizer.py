"""予約ドキュメントの正規化

保存形式の揺れ（埋め込み済みの予約対象・IDのみ・旧フィールド名）を吸収し、
表示に必要な派生フィールドを補完した BookingView を生成する。
既定値の補完はすべてこのモジュールに集約する。
"""

import math
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from aws_lambda_powertools import Logger

from gotour.booking.domain.enum import BookingStatus, BookingType, PaymentStatus
from gotour.booking.domain.read_model import BookingView
from gotour.booking.domain.value_object import BookingReference, PartySize
from gotour.shared.domain import IsoDateTime
from gotour.shared.utils import get_logger, translate

ReferenceAssigner = Callable[[BookingType, str], BookingReference]

PLACEHOLDER_IMAGES = {
    BookingType.TOUR: "https://images.unsplash.com/photo-1469474968028-56623f02e42e?q=80&w=2074&auto=format&fit=crop",
    BookingType.HOTEL: "https://images.unsplash.com/photo-1566073771259-6a8506099945?q=80&w=2070&auto=format&fit=crop",
    BookingType.FLIGHT: "https://images.unsplash.com/photo-1436491865332-7a61a109cc05?q=80&w=2074&auto=format&fit=crop",
}

# 予約種別ごとの (開始日時, 終了日時, 明示的な日数) のフィールド名
_PERIOD_FIELDS = {
    BookingType.TOUR: ("startDate", "endDate", "duration"),
    BookingType.HOTEL: ("checkInDate", "checkOutDate", "nights"),
}

_SECONDS_PER_DAY = 24 * 60 * 60


def resolve_booking_type(
    record: Mapping[str, Any], source_hint: BookingType | None = None
) -> BookingType:
    """予約種別を決定する

    永続化された bookingType -> 取得元のコレクション -> 旧データの推定 の順。
    """
    persisted = BookingType.from_value(record.get("bookingType"))
    if persisted is not None:
        return persisted
    if source_hint is not None:
        return source_hint
    if record.get("tour") or record.get("tourId"):
        return BookingType.TOUR
    if record.get("flight") or record.get("flightId"):
        return BookingType.FLIGHT
    return BookingType.HOTEL


def resolve_id(record: Mapping[str, Any]) -> str | None:
    """予約ID（_id -> id）。どちらもなければ None"""
    for key in ("_id", "id"):
        value = record.get(key)
        if value:
            return str(value)
    return None


def subject_of(record: Mapping[str, Any], booking_type: BookingType) -> dict[str, Any]:
    """埋め込まれた予約対象。IDのみ・未設定の場合は空の辞書"""
    subject = record.get(booking_type.subject_key)
    return dict(subject) if isinstance(subject, Mapping) else {}


def resolve_subject_id(
    record: Mapping[str, Any], booking_type: BookingType
) -> str | None:
    """予約対象のID

    埋め込みオブジェクトの _id / id、文字列ならそれ自体、
    なければ非正規化された <subject>Id を使う。
    """
    subject = record.get(booking_type.subject_key)
    if isinstance(subject, Mapping):
        subject_id = subject.get("_id") or subject.get("id")
        if subject_id:
            return str(subject_id)
    elif isinstance(subject, str) and subject:
        return subject

    fallback = record.get(f"{booking_type.subject_key}Id")
    return str(fallback) if fallback else None


def resolve_total_price(record: Mapping[str, Any]) -> Decimal:
    """合計金額。totalPrice が 0 または未設定なら旧フィールド price"""
    total = _to_amount(record.get("totalPrice"))
    if total:
        return total
    return _to_amount(record.get("price")) or Decimal("0")


def resolve_name(record: Mapping[str, Any], booking_type: BookingType) -> str:
    """表示名

    フライトは「出発地 - 到着地 (便名)」。
    それ以外は 予約対象の name -> <subject>Name -> 不明プレースホルダ。
    """
    subject = subject_of(record, booking_type)

    if booking_type == BookingType.FLIGHT:
        departure = _first(subject, record, "departureCity")
        arrival = _first(subject, record, "arrivalCity")
        if departure and arrival:
            flight_number = _first(subject, record, "flightNumber")
            route = f"{departure} - {arrival}"
            return f"{route} ({flight_number})" if flight_number else route

    name = subject.get("name") or record.get(f"{booking_type.subject_key}Name")
    if name:
        return str(name)
    return translate(f"placeholder.unknown.{booking_type.value}")


def resolve_image(record: Mapping[str, Any], booking_type: BookingType) -> str:
    """表示画像

    ツアー・ホテル: images[0] -> coverImage -> <subject>Image -> image -> 既定画像
    フライト: image -> 既定画像
    """
    subject = subject_of(record, booking_type)

    candidates: list[object] = []
    if booking_type != BookingType.FLIGHT:
        images = subject.get("images")
        if isinstance(images, (list, tuple)) and images:
            candidates.append(images[0])
        candidates.append(subject.get("coverImage"))
        candidates.append(record.get(f"{booking_type.subject_key}Image"))
    candidates.append(subject.get("image"))

    for candidate in candidates:
        if isinstance(candidate, str) and candidate:
            return candidate
    return PLACEHOLDER_IMAGES[booking_type]


def resolve_period(
    record: Mapping[str, Any], booking_type: BookingType
) -> tuple[IsoDateTime | None, IsoDateTime | None]:
    """開始・終了日時。解釈できない値は None"""
    if booking_type == BookingType.FLIGHT:
        subject = subject_of(record, booking_type)
        start_raw = _first(subject, record, "departureTime") or record.get("flightDate")
        end_raw = _first(subject, record, "arrivalTime")
        return IsoDateTime.parse(start_raw), IsoDateTime.parse(end_raw)

    start_key, end_key, _ = _PERIOD_FIELDS[booking_type]
    return IsoDateTime.parse(record.get(start_key)), IsoDateTime.parse(record.get(end_key))


def resolve_duration(record: Mapping[str, Any], booking_type: BookingType) -> int:
    """日数（ツアー）・泊数（ホテル）

    明示的な値 -> 開始・終了日の差（日単位で切り上げ） -> 予約対象の duration -> 0
    フライトは日数を持たないため常に 0。
    """
    if booking_type == BookingType.FLIGHT:
        return 0

    _, _, explicit_key = _PERIOD_FIELDS[booking_type]
    explicit = _to_count(record.get(explicit_key))
    if explicit:
        return explicit

    start, end = resolve_period(record, booking_type)
    if start is not None and end is not None:
        seconds = (end.value - start.value).total_seconds()
        return max(math.ceil(seconds / _SECONDS_PER_DAY), 0)

    return _to_count(subject_of(record, booking_type).get("duration"))


def resolve_guest_count(record: Mapping[str, Any], booking_type: BookingType) -> int:
    """人数

    ツアー・ホテル: guests（件数 または {adults, children}）、
    なければトップレベルの adults / children。
    フライト: passengers の件数、なければ numOfPassengers。
    """
    if booking_type == BookingType.FLIGHT:
        passengers = record.get("passengers")
        if isinstance(passengers, (list, tuple)) and passengers:
            return len(passengers)
        return _to_count(record.get("numOfPassengers"))

    if record.get("guests") is not None:
        return PartySize.from_value(record.get("guests")).total
    return PartySize.from_value(
        {"adults": record.get("adults"), "children": record.get("children")}
    ).total


def _first(subject: Mapping[str, Any], record: Mapping[str, Any], key: str) -> Any:
    return subject.get(key) or record.get(key)


def _to_amount(raw: object) -> Decimal | None:
    if raw is None or raw == "" or isinstance(raw, bool):
        return None
    try:
        amount = Decimal(str(raw))
    except InvalidOperation:
        return None
    return amount if amount.is_finite() else None


def _to_count(raw: object) -> int:
    amount = _to_amount(raw)
    if amount is None or amount < 0:
        return 0
    return int(amount)


def _parse_enum(enum_cls: type, raw: object) -> Any:
    if raw is None:
        return enum_cls("pending")
    try:
        return enum_cls(str(raw).lower())
    except ValueError:
        return None


class BookingNormalizer:
    """予約ドキュメントを BookingView に正規化する

    参照コード未設定の予約は、reference_assigner が渡されていれば
    その場で採番して永続化する（失敗してもビューの生成は継続する）。
    それ以外にストアを変更することはない。
    """

    def __init__(
        self,
        reference_assigner: ReferenceAssigner | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._reference_assigner = reference_assigner
        self._logger = logger or get_logger("booking-normalizer")

    def normalize(
        self, record: Mapping[str, Any], booking_type: BookingType | None = None
    ) -> BookingView | None:
        """ドキュメントを正規化する。ID を解決できない場合は None"""
        booking_id = resolve_id(record)
        if booking_id is None:
            self._logger.warning("Skipping booking record without id")
            return None

        booking_type = resolve_booking_type(record, booking_type)
        subject = subject_of(record, booking_type)
        start, end = resolve_period(record, booking_type)

        return BookingView(
            id=booking_id,
            booking_type=booking_type,
            user_id=resolve_user_id(record),
            subject_id=resolve_subject_id(record, booking_type),
            name=resolve_name(record, booking_type),
            image=resolve_image(record, booking_type),
            total_price=resolve_total_price(record),
            currency=str(record.get("currency") or "VND"),
            status=_parse_enum(BookingStatus, record.get("status")),
            payment_status=_parse_enum(PaymentStatus, record.get("paymentStatus")),
            start_at=start.value if start else None,
            end_at=end.value if end else None,
            duration=resolve_duration(record, booking_type),
            guest_count=resolve_guest_count(record, booking_type),
            booking_reference=self._reference_for(record, booking_type, booking_id),
            booking_number=_optional_str(record.get("bookingNumber")),
            cancellation_reason=_optional_str(record.get("cancellationReason")),
            destination=_optional_str(_first(subject, record, "destination")),
            room_name=_room_name_of(record) if booking_type == BookingType.HOTEL else None,
            airline=_airline_of(record, subject) if booking_type == BookingType.FLIGHT else None,
            flight_number=(
                _optional_str(_first(subject, record, "flightNumber"))
                if booking_type == BookingType.FLIGHT
                else None
            ),
            created_at=_datetime_of(record.get("createdAt")),
            updated_at=_datetime_of(record.get("updatedAt")),
        )

    def _reference_for(
        self, record: Mapping[str, Any], booking_type: BookingType, booking_id: str
    ) -> str | None:
        existing = _optional_str(record.get("bookingReference"))
        if existing or self._reference_assigner is None:
            return existing

        try:
            reference = self._reference_assigner(booking_type, booking_id)
        except Exception:
            self._logger.exception(
                "Failed to backfill booking reference",
                extra={"booking_id": booking_id, "booking_type": booking_type.value},
            )
            return None

        self._logger.info(
            "Backfilled booking reference",
            extra={"booking_id": booking_id, "booking_reference": str(reference)},
        )
        return str(reference)


def resolve_user_id(record: Mapping[str, Any]) -> str | None:
    """所有者のユーザーID（user が埋め込み済みの場合はその _id）"""
    user = record.get("user")
    if isinstance(user, Mapping):
        user = user.get("_id") or user.get("id")
    return _optional_str(user or record.get("userId"))


def _room_name_of(record: Mapping[str, Any]) -> str:
    for key in ("room", "roomType", "roomTypeInfo"):
        room = record.get(key)
        if isinstance(room, Mapping) and room.get("name"):
            return str(room["name"])
    return _optional_str(record.get("roomName")) or translate("placeholder.standard_room")


def _airline_of(record: Mapping[str, Any], subject: Mapping[str, Any]) -> str:
    return _optional_str(_first(subject, record, "airline")) or translate("placeholder.unknown")


def _datetime_of(raw: object) -> datetime | None:
    parsed = IsoDateTime.parse(raw)
    return parsed.value if parsed else None


def _optional_str(raw: object) -> str | None:
    return str(raw) if raw not in (None, "") else None

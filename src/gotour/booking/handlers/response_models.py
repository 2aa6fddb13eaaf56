from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from gotour.booking.applications.list_bookings import BookingPage
from gotour.booking.domain.entity import Booking
from gotour.booking.domain.read_model import BookingView


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    id: str
    booking_type: str
    user: str
    subject_id: str
    total_price: str
    currency: str
    status: str
    payment_status: str
    payment_method: str | None = None
    booking_reference: str | None = None
    booking_number: str | None = None
    cancellation_reason: str | None = None
    special_requests: str | None = None
    created_at: str
    updated_at: str
    details: dict[str, Any] = {}


class PaginationData(BaseModel):
    """ページング情報"""

    count: int
    total: int
    total_pages: int
    current_page: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: Any
    pagination: PaginationData | None = None
    message: str | None = None


def booking_data(booking: Booking, details: dict[str, Any] | None = None) -> BookingData:
    """Booking エンティティをレスポンスデータに変換する"""
    return BookingData(
        id=str(booking.id),
        booking_type=booking.booking_type.value,
        user=str(booking.user_id),
        subject_id=booking.subject_id,
        total_price=str(booking.total_price.amount),
        currency=str(booking.total_price.currency),
        status=booking.status.value,
        payment_status=booking.payment_status.value,
        payment_method=booking.payment_method.value if booking.payment_method else None,
        booking_reference=str(booking.booking_reference) if booking.booking_reference else None,
        booking_number=str(booking.booking_number) if booking.booking_number else None,
        cancellation_reason=booking.cancellation_reason,
        special_requests=booking.special_requests,
        created_at=booking.created_at.isoformat(),
        updated_at=booking.updated_at.isoformat(),
        details=details or {},
    )


def to_response(booking: Booking, details: dict[str, Any] | None = None) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=booking_data(booking, details)).model_dump(
        mode="json", exclude_none=True
    )


def view_response(view: BookingView) -> dict:
    """正規化済みビューをレスポンス辞書に変換する"""
    return SuccessResponse(data=view.model_dump(mode="json")).model_dump(
        mode="json", exclude_none=True
    )


def views_response(views: list[BookingView]) -> dict:
    """正規化済みビューの一覧をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=[view.model_dump(mode="json") for view in views],
        pagination=PaginationData(
            count=len(views), total=len(views), total_pages=1, current_page=1
        ),
    ).model_dump(mode="json", exclude_none=True)


def page_response(page: BookingPage) -> dict:
    """ページング済み一覧をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=[view.model_dump(mode="json") for view in page.items],
        pagination=PaginationData(
            count=page.count,
            total=page.total,
            total_pages=page.total_pages,
            current_page=page.current_page,
        ),
    ).model_dump(mode="json", exclude_none=True)


def message_response(message: str) -> dict:
    """データを伴わない成功レスポンス"""
    return SuccessResponse(data=None, message=message).model_dump(
        mode="json", exclude_none=True
    )

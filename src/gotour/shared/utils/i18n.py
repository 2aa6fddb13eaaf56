"""利用者向けメッセージの多言語化

アクティブなロケールは環境変数 GOTOUR_LOCALE（既定: vi）で決まる。
未登録のロケールは vi にフォールバックする。
"""

import os

DEFAULT_LOCALE = "vi"

MESSAGES: dict[str, dict[str, str]] = {
    "vi": {
        "error.booking_not_found": "Không tìm thấy thông tin đặt chỗ",
        "error.subject_not_found": "Không tìm thấy đối tượng đặt chỗ",
        "error.subject_not_found.tour": "Không tìm thấy thông tin tour. Vui lòng cung cấp thông tin tour hợp lệ",
        "error.subject_not_found.hotel": "Không tìm thấy thông tin khách sạn hoặc phòng. Vui lòng cung cấp thông tin hợp lệ",
        "error.subject_not_found.flight": "Không tìm thấy thông tin chuyến bay. Vui lòng cung cấp thông tin chuyến bay hợp lệ",
        "error.forbidden": "Không có quyền thực hiện thao tác này",
        "error.conflict": "Không thể hủy đặt chỗ đã hoàn thành",
        "error.terminal_state": "Không thể thay đổi trạng thái của đặt chỗ đã hoàn thành",
        "error.invalid_status": "Trạng thái không hợp lệ",
        "error.invalid_payment_status": "Trạng thái thanh toán không hợp lệ",
        "error.validation": "Dữ liệu đặt chỗ không hợp lệ",
        "error.upstream_unavailable": "Dịch vụ dữ liệu bên ngoài tạm thời không khả dụng",
        "error.duplicate": "Mã đặt chỗ đã tồn tại",
        "error.concurrent_update": "Đặt chỗ vừa được cập nhật bởi thao tác khác. Vui lòng thử lại",
        "error.internal": "Không thể xử lý yêu cầu. Vui lòng thử lại sau",
        "booking.deleted": "Đã xóa thông tin đặt chỗ thành công",
        "cancellation.default_reason": "Người dùng hủy",
        "placeholder.unknown": "Không xác định",
        "placeholder.unknown.tour": "Tour không xác định",
        "placeholder.unknown.hotel": "Khách sạn không xác định",
        "placeholder.unknown.flight": "Chuyến bay không xác định",
        "placeholder.standard_room": "Phòng tiêu chuẩn",
        "status.pending": "Chờ xác nhận",
        "status.confirmed": "Đã xác nhận",
        "status.cancelled": "Đã hủy",
        "status.completed": "Đã hoàn thành",
        "payment_status.pending": "Chờ thanh toán",
        "payment_status.paid": "Đã thanh toán",
        "payment_status.refunded": "Đã hoàn tiền",
        "payment_status.failed": "Thất bại",
    },
    "en": {
        "error.booking_not_found": "Booking not found",
        "error.subject_not_found": "Booking subject not found",
        "error.subject_not_found.tour": "Tour not found. Please provide a valid tour",
        "error.subject_not_found.hotel": "Hotel or room not found. Please provide a valid hotel and room",
        "error.subject_not_found.flight": "Flight not found. Please provide valid flight information",
        "error.forbidden": "You are not allowed to perform this action",
        "error.conflict": "A completed booking cannot be cancelled",
        "error.terminal_state": "The status of a completed booking cannot be changed",
        "error.invalid_status": "Invalid booking status",
        "error.invalid_payment_status": "Invalid payment status",
        "error.validation": "Invalid booking data",
        "error.upstream_unavailable": "The external data service is temporarily unavailable",
        "error.duplicate": "Booking reference already exists",
        "error.concurrent_update": "The booking was updated by another request. Please try again",
        "error.internal": "Unable to process the request. Please try again later",
        "booking.deleted": "Booking deleted successfully",
        "cancellation.default_reason": "User cancelled",
        "placeholder.unknown": "Unknown",
        "placeholder.unknown.tour": "Unknown tour",
        "placeholder.unknown.hotel": "Unknown hotel",
        "placeholder.unknown.flight": "Unknown flight",
        "placeholder.standard_room": "Standard room",
        "status.pending": "Pending",
        "status.confirmed": "Confirmed",
        "status.cancelled": "Cancelled",
        "status.completed": "Completed",
        "payment_status.pending": "Awaiting payment",
        "payment_status.paid": "Paid",
        "payment_status.refunded": "Refunded",
        "payment_status.failed": "Failed",
    },
}


def active_locale() -> str:
    """アクティブなロケールを返す"""
    locale = os.getenv("GOTOUR_LOCALE", DEFAULT_LOCALE).lower()
    return locale if locale in MESSAGES else DEFAULT_LOCALE


def translate(key: str, locale: str | None = None) -> str:
    """メッセージキーを翻訳する。未登録のキーはキー自身を返す"""
    catalog = MESSAGES.get(locale or active_locale(), MESSAGES[DEFAULT_LOCALE])
    return catalog.get(key, MESSAGES[DEFAULT_LOCALE].get(key, key))

from .booking_view import BookingView as BookingView

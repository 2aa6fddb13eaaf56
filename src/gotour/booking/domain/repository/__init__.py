from .booking_repository import BookingQuery as BookingQuery
from .booking_repository import BookingRepository as BookingRepository

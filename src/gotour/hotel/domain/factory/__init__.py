from .hotel_booking_factory import HotelBookingDetails as HotelBookingDetails
from .hotel_booking_factory import HotelBookingFactory as HotelBookingFactory

from .tour_booking_factory import TourBookingDetails as TourBookingDetails
from .tour_booking_factory import TourBookingFactory as TourBookingFactory

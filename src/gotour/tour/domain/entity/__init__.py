from .tour import Tour as Tour
from .tour_booking import TourBooking as TourBooking

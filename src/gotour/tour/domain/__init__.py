from .entity import Tour as Tour
from .entity import TourBooking as TourBooking
from .factory import TourBookingDetails as TourBookingDetails
from .factory import TourBookingFactory as TourBookingFactory
from .repository import TourRepository as TourRepository

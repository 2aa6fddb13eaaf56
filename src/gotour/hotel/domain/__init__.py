from .value_object import StayPeriod as StayPeriod
from .entity import Hotel as Hotel
from .entity import HotelBooking as HotelBooking
from .entity import Room as Room
from .factory import HotelBookingDetails as HotelBookingDetails
from .factory import HotelBookingFactory as HotelBookingFactory
from .repository import HotelRepository as HotelRepository

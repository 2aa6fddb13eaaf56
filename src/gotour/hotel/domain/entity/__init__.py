from .hotel import Hotel as Hotel
from .hotel import Room as Room
from .hotel_booking import HotelBooking as HotelBooking

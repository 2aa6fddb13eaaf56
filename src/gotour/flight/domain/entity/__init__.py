from .flight import Flight as Flight
from .flight import SeatOffer as SeatOffer
from .flight_booking import FlightBooking as FlightBooking

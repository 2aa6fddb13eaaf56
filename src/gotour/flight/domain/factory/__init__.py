from .flight_booking_factory import FlightBookingDetails as FlightBookingDetails
from .flight_booking_factory import FlightBookingFactory as FlightBookingFactory
from .flight_factory import FlightFactory as FlightFactory

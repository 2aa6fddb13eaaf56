from .enum import Gender as Gender
from .enum import PassengerType as PassengerType
from .enum import SeatClass as SeatClass
from .enum import Title as Title
from .value_object import ContactInfo as ContactInfo
from .value_object import FlightNumber as FlightNumber
from .value_object import Passenger as Passenger
from .entity import Flight as Flight
from .entity import FlightBooking as FlightBooking
from .entity import SeatOffer as SeatOffer
from .factory import FlightBookingDetails as FlightBookingDetails
from .factory import FlightBookingFactory as FlightBookingFactory
from .factory import FlightFactory as FlightFactory
from .repository import FlightDataProvider as FlightDataProvider
from .repository import FlightRepository as FlightRepository

from .flight_number import FlightNumber as FlightNumber
from .passenger import ContactInfo as ContactInfo
from .passenger import Passenger as Passenger

from .flight_data_provider import FlightDataProvider as FlightDataProvider
from .flight_repository import FlightRepository as FlightRepository

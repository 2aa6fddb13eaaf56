from abc import ABC, abstractmethod

from gotour.flight.domain.entity import Flight
from gotour.flight.domain.value_object import FlightNumber


class FlightRepository(ABC):
    """フライトのレポジトリ"""

    @abstractmethod
    def find_by_id(self, flight_id: str) -> Flight | None:
        """フライトIDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_flight_number(self, flight_number: FlightNumber) -> Flight | None:
        """フライト番号で検索"""
        raise NotImplementedError

    @abstractmethod
    def save(self, flight: Flight) -> Flight:
        """永続化する"""
        raise NotImplementedError

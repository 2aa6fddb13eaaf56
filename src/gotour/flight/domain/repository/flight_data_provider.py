from abc import ABC, abstractmethod
from typing import Any

from gotour.flight.domain.value_object import FlightNumber


class FlightDataProvider(ABC):
    """外部のフライト情報提供元"""

    @abstractmethod
    def get_flight_details(
        self, flight_number: FlightNumber, flight_date: str | None = None
    ) -> dict[str, Any] | None:
        """フライト情報を取得する

        該当便がなければ None。
        提供元に接続できない場合は UpstreamUnavailableException。
        """
        raise NotImplementedError

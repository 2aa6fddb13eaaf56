import os
from typing import Any

import httpx
from aws_lambda_powertools import Logger
from pydantic import BaseModel, ValidationError

from gotour.flight.domain.repository import FlightDataProvider
from gotour.flight.domain.value_object import FlightNumber
from gotour.shared.domain.exception import UpstreamUnavailableException
from gotour.shared.utils import get_logger

DEFAULT_BASE_URL = "http://api.aviationstack.com/v1"
DEFAULT_TIMEOUT_SECONDS = 10.0


class ProviderError(BaseModel):
    """aviationstack のエラー情報"""

    code: str | int | None = None
    message: str = "Unknown error"


class FlightsResponse(BaseModel):
    """aviationstack の /flights レスポンス

    各便の中身はファクトリ側で解釈するため、ここでは辞書であることだけを検証する。
    """

    data: list[dict[str, Any]] | None = None
    error: ProviderError | None = None


class AviationFlightDataProvider(FlightDataProvider):
    """aviationstack 互換 API からフライト情報を取得する

    設定は環境変数 AVIATION_API_URL / AVIATION_API_KEY / AVIATION_API_TIMEOUT。
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
        logger: Logger | None = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("AVIATION_API_URL", DEFAULT_BASE_URL)).rstrip("/")
        self.api_key = api_key or os.getenv("AVIATION_API_KEY")
        self.timeout = timeout or float(
            os.getenv("AVIATION_API_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)
        )
        self._client = client
        self._logger = logger or get_logger("aviation-flight-data")

    def get_flight_details(
        self, flight_number: FlightNumber, flight_date: str | None = None
    ) -> dict[str, Any] | None:
        """フライト番号（と搭乗日）で最初に一致した便を返す"""
        if not self.api_key:
            raise UpstreamUnavailableException(
                "Flight data provider is not configured. Set AVIATION_API_KEY",
                booking_type="flight",
            )

        params = {"access_key": self.api_key, "flight_iata": str(flight_number)}
        if flight_date:
            params["flight_date"] = flight_date

        payload = self._get("/flights", params)
        try:
            response = FlightsResponse.model_validate(payload)
        except ValidationError as e:
            raise UpstreamUnavailableException(
                "Flight data provider returned an unexpected response "
                f"({e.error_count()} validation errors)",
                booking_type="flight",
            ) from e

        if response.error is not None:
            raise UpstreamUnavailableException(
                f"Flight data provider error: {response.error.message}",
                booking_type="flight",
            )

        flights = response.data or []
        if not flights:
            self._logger.info(
                "No flight data found", extra={"flight_number": str(flight_number)}
            )
            return None
        return flights[0]

    def _get(self, path: str, params: dict[str, Any]) -> Any:
        client = self._client or httpx.Client(timeout=self.timeout)
        try:
            response = client.get(
                f"{self.base_url}{path}",
                params=params,
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise UpstreamUnavailableException(
                f"Flight data provider request failed: {e}", booking_type="flight"
            ) from e
        finally:
            if self._client is None:
                client.close()

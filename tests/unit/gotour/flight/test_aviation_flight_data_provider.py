import httpx
import pytest

from gotour.flight.domain.value_object import FlightNumber
from gotour.flight.infrastructure.aviation_flight_data_provider import (
    AviationFlightDataProvider,
)
from gotour.shared.domain.exception import UpstreamUnavailableException

FLIGHT_NUMBER = FlightNumber("VN213")


def _provider(handler, mock_logger, api_key="test-key") -> AviationFlightDataProvider:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return AviationFlightDataProvider(
        base_url="https://aviation.test/v1",
        api_key=api_key,
        client=client,
        logger=mock_logger,
    )


class TestAviationFlightDataProvider:
    def test_returns_first_matching_flight(self, mock_logger, provider_details):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"data": [provider_details, {"other": True}]})

        details = _provider(handler, mock_logger).get_flight_details(
            FLIGHT_NUMBER, "2024-07-01"
        )

        assert details == provider_details
        assert requests[0].url.path == "/v1/flights"
        assert requests[0].url.params["flight_iata"] == "VN213"
        assert requests[0].url.params["flight_date"] == "2024-07-01"
        assert requests[0].url.params["access_key"] == "test-key"

    def test_flight_date_is_optional(self, mock_logger):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"data": []})

        _provider(handler, mock_logger).get_flight_details(FLIGHT_NUMBER)

        assert "flight_date" not in requests[0].url.params

    def test_no_data_returns_none(self, mock_logger):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"data": []})

        assert _provider(handler, mock_logger).get_flight_details(FLIGHT_NUMBER) is None

    def test_server_error_is_upstream_unavailable(self, mock_logger):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="Internal Server Error")

        with pytest.raises(UpstreamUnavailableException):
            _provider(handler, mock_logger).get_flight_details(FLIGHT_NUMBER)

    def test_api_error_body_is_upstream_unavailable(self, mock_logger):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, json={"error": {"code": "usage_limit_reached", "message": "Limit reached"}}
            )

        with pytest.raises(UpstreamUnavailableException, match="Limit reached"):
            _provider(handler, mock_logger).get_flight_details(FLIGHT_NUMBER)

    @pytest.mark.parametrize(
        "body",
        [
            {"error": "invalid_access_key"},
            [{"flight_date": "2024-07-01"}],
            {"data": {"flight_date": "2024-07-01"}},
            {"data": ["VN213"]},
        ],
    )
    def test_unexpected_body_is_upstream_unavailable(self, mock_logger, body):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=body)

        with pytest.raises(UpstreamUnavailableException, match="unexpected response"):
            _provider(handler, mock_logger).get_flight_details(FLIGHT_NUMBER)

    def test_network_error_is_upstream_unavailable(self, mock_logger):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamUnavailableException):
            _provider(handler, mock_logger).get_flight_details(FLIGHT_NUMBER)

    def test_missing_api_key_is_upstream_unavailable(self, mock_logger, monkeypatch):
        monkeypatch.delenv("AVIATION_API_KEY", raising=False)

        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        with pytest.raises(UpstreamUnavailableException, match="AVIATION_API_KEY"):
            _provider(handler, mock_logger, api_key=None).get_flight_details(FLIGHT_NUMBER)

    def test_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("AVIATION_API_URL", "https://env.test/v1/")
        monkeypatch.setenv("AVIATION_API_KEY", "env-key")
        monkeypatch.setenv("AVIATION_API_TIMEOUT", "3")

        provider = AviationFlightDataProvider()

        assert provider.base_url == "https://env.test/v1"
        assert provider.api_key == "env-key"
        assert provider.timeout == 3.0

from aws_lambda_powertools import Logger

from gotour.booking.domain.repository import BookingRepository
from gotour.flight.domain.entity import Flight, FlightBooking
from gotour.flight.domain.factory import (
    FlightBookingDetails,
    FlightBookingFactory,
    FlightFactory,
)
from gotour.flight.domain.repository import FlightDataProvider, FlightRepository
from gotour.flight.domain.value_object import FlightNumber
from gotour.shared.domain import Actor
from gotour.shared.domain.exception import (
    ForbiddenException,
    SubjectNotFoundException,
    UpstreamUnavailableException,
    ValidationException,
)
from gotour.shared.utils import get_logger


class ReserveFlightService:
    """フライト予約サービス

    予約対象のフライトは次の順で解決する。
    1. 登録済みフライトの ID
    2. 登録済みフライトのフライト番号
    3. 外部のフライト情報から合成して登録する
    どれでも解決できなければ予約は作成しない。
    """

    def __init__(
        self,
        repository: BookingRepository,
        flight_repository: FlightRepository,
        flight_data_provider: FlightDataProvider,
        factory: FlightBookingFactory,
        flight_factory: FlightFactory | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._repository = repository
        self._flight_repository = flight_repository
        self._flight_data_provider = flight_data_provider
        self._factory = factory
        self._flight_factory = flight_factory or FlightFactory()
        self._logger = logger or get_logger("reserve-flight")

    def reserve(
        self,
        actor: Actor,
        details: FlightBookingDetails,
        flight_id: str | None = None,
    ) -> FlightBooking:
        """フライトを予約する"""
        if not actor.is_customer:
            raise ForbiddenException("Only users can create bookings", booking_type="flight")

        flight = self._resolve_flight(
            flight_id, details.get("flight_code"), details.get("flight_date")
        )
        booking = self._factory.create(actor.user_id, flight, details)
        self._repository.create(booking)
        self._logger.info(
            "Flight booking created",
            extra={
                "booking_id": str(booking.id),
                "flight_id": flight.id,
                "flight_number": str(flight.flight_number),
                "passengers": len(booking.passengers),
            },
        )
        return booking

    def _resolve_flight(
        self, flight_id: str | None, flight_code: str | None, flight_date: str | None
    ) -> Flight:
        if flight_id:
            flight = self._flight_repository.find_by_id(flight_id)
            if flight is not None:
                return flight

        if not flight_code:
            raise SubjectNotFoundException(
                f"Flight not found: {flight_id}", booking_type="flight"
            )

        try:
            flight_number = FlightNumber(flight_code)
        except ValueError as e:
            raise ValidationException(str(e), booking_type="flight") from e

        flight = self._flight_repository.find_by_flight_number(flight_number)
        if flight is not None:
            return flight

        self._logger.info(
            "Flight not registered, synthesizing from provider",
            extra={"flight_number": str(flight_number), "flight_date": flight_date},
        )
        try:
            provided = self._flight_data_provider.get_flight_details(
                flight_number, flight_date
            )
        except UpstreamUnavailableException as e:
            self._logger.warning(
                "Flight data provider unavailable",
                extra={"flight_number": str(flight_number), "error": str(e)},
            )
            raise SubjectNotFoundException(
                f"Flight not found: {flight_number}", booking_type="flight"
            ) from e

        if provided is None:
            raise SubjectNotFoundException(
                f"Flight not found: {flight_number}", booking_type="flight"
            )

        try:
            flight = self._flight_factory.from_provider(flight_number, provided)
        except (ValueError, OverflowError) as e:
            self._logger.warning(
                "Flight data provider returned unusable flight details",
                extra={"flight_number": str(flight_number), "error": str(e)},
            )
            raise SubjectNotFoundException(
                f"Flight not found: {flight_number}", booking_type="flight"
            ) from e
        return self._flight_repository.save(flight)

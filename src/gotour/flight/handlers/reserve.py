from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from gotour.booking.domain.enum import BookingType
from gotour.booking.handlers.error_responses import error_response
from gotour.booking.handlers.response_models import to_response
from gotour.booking.infrastructure.repositories import build_booking_repositories
from gotour.flight.applications.reserve_flight import ReserveFlightService
from gotour.flight.domain.entity import FlightBooking
from gotour.flight.domain.factory import FlightBookingDetails, FlightBookingFactory
from gotour.flight.handlers.request_models import ReserveFlightRequest
from gotour.flight.infrastructure.aviation_flight_data_provider import (
    AviationFlightDataProvider,
)
from gotour.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from gotour.shared.utils import actor_from_event, api_response

logger = Logger()

repositories = build_booking_repositories()
service = ReserveFlightService(
    repository=repositories[BookingType.FLIGHT],
    flight_repository=DynamoDBFlightRepository(),
    flight_data_provider=AviationFlightDataProvider(logger=logger),
    factory=FlightBookingFactory(),
    logger=logger,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """フライト予約 Lambda Handler"""
    try:
        actor = actor_from_event(event)
        request = ReserveFlightRequest.model_validate(event.json_body or {})

        logger.info(
            "Received reserve flight request",
            extra={
                "flight": request.flight,
                "flight_code": request.flight_code,
                "flight_date": request.flight_date,
            },
        )

        booking = service.reserve(actor, _to_details(request), flight_id=request.flight)
        return api_response(201, to_response(booking, _details_of(booking)))
    except Exception as e:
        return error_response(e, logger)


def _to_details(request: ReserveFlightRequest) -> FlightBookingDetails:
    """リクエストボディから FlightBookingDetails を構築する"""
    return {
        "flight_code": request.flight_code,
        "flight_date": request.flight_date,
        "passengers": [
            p.model_dump(by_alias=True, exclude_none=True, mode="json")
            for p in request.passengers
        ],
        "contact_info": (
            request.contact_info.model_dump(by_alias=True, exclude_none=True)
            if request.contact_info
            else None
        ),
        "total_price": request.total_price,
        "price": request.price,
        "payment_method": request.payment_method.value if request.payment_method else None,
        "special_requests": request.special_requests,
    }


def _details_of(booking: FlightBooking) -> dict:
    return {
        "flight_code": booking.flight_code,
        "flight_date": booking.flight_date,
        "departure_time": booking.departure_time.isoformat() if booking.departure_time else None,
        "passengers": [p.to_dict() for p in booking.passengers],
    }

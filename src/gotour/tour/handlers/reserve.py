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
from gotour.shared.utils import actor_from_event, api_response
from gotour.tour.applications.reserve_tour import ReserveTourService
from gotour.tour.domain.entity import TourBooking
from gotour.tour.domain.factory import TourBookingDetails, TourBookingFactory
from gotour.tour.handlers.request_models import ReserveTourRequest
from gotour.tour.infrastructure.dynamodb_tour_repository import DynamoDBTourRepository

logger = Logger()

repositories = build_booking_repositories()
service = ReserveTourService(
    repository=repositories[BookingType.TOUR],
    tour_repository=DynamoDBTourRepository(),
    factory=TourBookingFactory(),
    logger=logger,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """ツアー予約 Lambda Handler"""
    try:
        actor = actor_from_event(event)
        request = ReserveTourRequest.model_validate(event.json_body or {})

        logger.info("Received reserve tour request", extra={"tour_id": request.tour_id})

        booking = service.reserve(actor, request.tour_id, _to_details(request))
        return api_response(201, to_response(booking, _details_of(booking)))
    except Exception as e:
        return error_response(e, logger)


def _to_details(request: ReserveTourRequest) -> TourBookingDetails:
    """リクエストボディから TourBookingDetails を構築する"""
    return {
        "start_date": request.start_date,
        "end_date": request.end_date,
        "adults": request.adults,
        "children": request.children,
        "total_price": request.total_price,
        "price": request.price,
        "payment_method": request.payment_method.value if request.payment_method else None,
        "special_requests": request.special_requests,
    }


def _details_of(booking: TourBooking) -> dict:
    return {
        "start_date": booking.start_date.isoformat(),
        "end_date": booking.end_date.isoformat() if booking.end_date else None,
        "adults": booking.party_size.adults,
        "children": booking.party_size.children,
    }

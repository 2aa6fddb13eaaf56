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
from gotour.hotel.applications.reserve_hotel import ReserveHotelService
from gotour.hotel.domain.entity import HotelBooking
from gotour.hotel.domain.factory import HotelBookingDetails, HotelBookingFactory
from gotour.hotel.handlers.request_models import ReserveHotelRequest
from gotour.hotel.infrastructure.dynamodb_hotel_repository import DynamoDBHotelRepository
from gotour.shared.utils import actor_from_event, api_response

logger = Logger()

repositories = build_booking_repositories()
service = ReserveHotelService(
    repository=repositories[BookingType.HOTEL],
    hotel_repository=DynamoDBHotelRepository(),
    factory=HotelBookingFactory(),
    logger=logger,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """ホテル予約 Lambda Handler"""
    try:
        actor = actor_from_event(event)
        request = ReserveHotelRequest.model_validate(event.json_body or {})

        logger.info(
            "Received reserve hotel request",
            extra={"hotel_id": request.hotel_id, "room_id": request.room_id},
        )

        booking = service.reserve(
            actor, request.hotel_id, request.room_id, _to_details(request)
        )
        return api_response(201, to_response(booking, _details_of(booking)))
    except Exception as e:
        return error_response(e, logger)


def _to_details(request: ReserveHotelRequest) -> HotelBookingDetails:
    """リクエストボディから HotelBookingDetails を構築する"""
    guests = request.guests
    return {
        "check_in_date": request.check_in_date,
        "check_out_date": request.check_out_date,
        "guests": guests if isinstance(guests, int) else guests.model_dump(),
        "total_price": request.total_price,
        "price": request.price,
        "payment_method": request.payment_method.value if request.payment_method else None,
        "special_requests": request.special_requests,
    }


def _details_of(booking: HotelBooking) -> dict:
    return {
        "room_id": booking.room_id,
        "check_in_date": booking.stay_period.check_in.isoformat(),
        "check_out_date": booking.stay_period.check_out.isoformat(),
        "nights": booking.nights,
        "guests": booking.party_size.to_dict(),
    }

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from gotour.booking.applications.get_booking_details import GetBookingDetailsService
from gotour.booking.domain.value_object import BookingId
from gotour.booking.handlers.error_responses import error_response
from gotour.booking.handlers.request_models import BookingPathParameters
from gotour.booking.handlers.response_models import view_response
from gotour.booking.infrastructure.repositories import build_booking_repositories
from gotour.shared.utils import actor_from_event, api_response

logger = Logger()

repositories = build_booking_repositories()
services = {
    booking_type: GetBookingDetailsService(repository=repository, logger=logger)
    for booking_type, repository in repositories.items()
}


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約詳細取得 Lambda Handler"""
    try:
        path = BookingPathParameters.model_validate(event.path_parameters or {})
        actor = actor_from_event(event)

        logger.info(
            "Fetching booking details",
            extra={"booking_id": path.booking_id, "booking_type": path.booking_type.value},
        )

        view = services[path.booking_type].get(BookingId(value=path.booking_id), actor)
        return api_response(200, view_response(view))
    except Exception as e:
        return error_response(e, logger)

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from gotour.booking.applications.update_booking_status import UpdateBookingStatusService
from gotour.booking.domain.value_object import BookingId
from gotour.booking.handlers.error_responses import error_response
from gotour.booking.handlers.request_models import (
    BookingPathParameters,
    UpdateStatusRequest,
)
from gotour.booking.handlers.response_models import to_response
from gotour.booking.infrastructure.repositories import build_booking_repositories
from gotour.shared.utils import actor_from_event, api_response

logger = Logger()

repositories = build_booking_repositories()
services = {
    booking_type: UpdateBookingStatusService(repository=repository)
    for booking_type, repository in repositories.items()
}


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約ステータス更新 Lambda Handler（管理者用）"""
    try:
        path = BookingPathParameters.model_validate(event.path_parameters or {})
        request = UpdateStatusRequest.model_validate(event.json_body or {})
        actor = actor_from_event(event)

        logger.info(
            "Received update booking status request",
            extra={
                "booking_id": path.booking_id,
                "booking_type": path.booking_type.value,
                "status": request.status,
            },
        )

        booking = services[path.booking_type].update(
            BookingId(value=path.booking_id), request.status, actor
        )
        return api_response(200, to_response(booking))
    except Exception as e:
        return error_response(e, logger)

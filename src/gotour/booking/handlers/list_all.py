from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from gotour.booking.applications.list_bookings import ListBookingsService
from gotour.booking.handlers.error_responses import error_response
from gotour.booking.handlers.request_models import (
    BookingTypePathParameters,
    ListBookingsQuery,
)
from gotour.booking.handlers.response_models import page_response
from gotour.booking.infrastructure.repositories import build_booking_repositories
from gotour.shared.utils import actor_from_event, api_response

logger = Logger()

repositories = build_booking_repositories()
services = {
    booking_type: ListBookingsService(repository=repository, logger=logger)
    for booking_type, repository in repositories.items()
}


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約一覧取得 Lambda Handler（管理者用・種別ごと）"""
    try:
        booking_type = BookingTypePathParameters.model_validate(
            event.path_parameters or {}
        ).booking_type
        query = ListBookingsQuery.model_validate(event.query_string_parameters or {})
        actor = actor_from_event(event)

        logger.info(
            "Listing bookings",
            extra={
                "booking_type": booking_type.value,
                "page": query.page,
                "limit": query.limit,
                "status": query.status.value if query.status else None,
            },
        )

        page = services[booking_type].list(
            actor,
            page=query.page,
            limit=query.limit,
            status=query.status,
            from_date=query.from_date,
            to_date=query.to_date,
        )
        return api_response(200, page_response(page))
    except Exception as e:
        return error_response(e, logger)

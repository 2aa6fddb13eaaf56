from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from gotour.booking.applications.list_my_bookings import ListMyBookingsService
from gotour.booking.handlers.error_responses import error_response
from gotour.booking.handlers.request_models import ListMyBookingsQuery
from gotour.booking.handlers.response_models import views_response
from gotour.booking.infrastructure.repositories import build_booking_repositories
from gotour.shared.utils import actor_from_event, api_response

logger = Logger()

service = ListMyBookingsService(repositories=build_booking_repositories(), logger=logger)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """利用者の予約一覧取得 Lambda Handler（ツアー・ホテル・フライト横断）"""
    try:
        query = ListMyBookingsQuery.model_validate(event.query_string_parameters or {})
        actor = actor_from_event(event)

        logger.info(
            "Listing my bookings",
            extra={"user_id": str(actor.user_id), "filter": query.type.value},
        )

        views = service.list(actor.user_id, query.type)
        return api_response(200, views_response(views))
    except Exception as e:
        return error_response(e, logger)

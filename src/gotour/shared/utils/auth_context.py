from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2

from gotour.shared.domain.enum import ActorRole
from gotour.shared.domain.exception import ForbiddenException
from gotour.shared.domain.value_object import Actor, UserId


def actor_from_event(event: APIGatewayProxyEventV2) -> Actor:
    """Lambda Authorizer が付与したコンテキストから操作者を取り出す

    認証自体は API Gateway 側で完了している前提。
    コンテキストが欠けている場合は ForbiddenException を送出する。
    """
    authorizer = event.raw_event.get("requestContext", {}).get("authorizer") or {}
    context = authorizer.get("lambda") or {}

    user_id = context.get("userId") or context.get("user_id")
    if not user_id:
        raise ForbiddenException("Missing authenticated user in request context")

    try:
        role = ActorRole(str(context.get("role", ActorRole.USER.value)).lower())
    except ValueError as e:
        raise ForbiddenException(f"Unknown role: {context.get('role')}") from e

    return Actor(user_id=UserId(value=str(user_id)), role=role)

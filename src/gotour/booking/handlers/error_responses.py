"""ドメイン例外から API Gateway レスポンスへの変換"""

import json

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from gotour.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    ForbiddenException,
    InvalidPaymentStatusException,
    InvalidStatusException,
    OptimisticLockException,
    ResourceNotFoundException,
    SubjectNotFoundException,
    TerminalStateViolationException,
    UpstreamUnavailableException,
    ValidationException,
)
from gotour.shared.utils import api_response, translate

# 具体的な例外から順に評価する
_ERROR_MAPPINGS: list[tuple[type[DomainException], int, str]] = [
    (SubjectNotFoundException, 404, "error.subject_not_found"),
    (ResourceNotFoundException, 404, "error.booking_not_found"),
    (ForbiddenException, 403, "error.forbidden"),
    (TerminalStateViolationException, 409, "error.terminal_state"),
    (BusinessRuleViolationException, 409, "error.conflict"),
    (DuplicateResourceException, 409, "error.duplicate"),
    (OptimisticLockException, 409, "error.concurrent_update"),
    (InvalidStatusException, 400, "error.invalid_status"),
    (InvalidPaymentStatusException, 400, "error.invalid_payment_status"),
    (ValidationException, 400, "error.validation"),
    (UpstreamUnavailableException, 502, "error.upstream_unavailable"),
]


def error_response(error: Exception, logger: Logger) -> dict:
    """例外を API Gateway HTTP API のエラーレスポンスに変換する

    想定外の例外はスタックトレースをログに残し、500 を返す。
    """
    if isinstance(error, DomainException):
        for exception_type, status_code, message_key in _ERROR_MAPPINGS:
            if isinstance(error, exception_type):
                return _domain_error(error, status_code, message_key, logger)

    if isinstance(error, ValidationError):
        logger.warning("Invalid request", extra={"errors": error.errors()})
        return api_response(
            400,
            {
                "status": "error",
                "message": translate("error.validation"),
                "errors": [
                    {"field": ".".join(str(p) for p in e["loc"]), "message": e["msg"]}
                    for e in error.errors()
                ],
            },
        )

    if isinstance(error, json.JSONDecodeError):
        logger.warning("Malformed request body", extra={"error": str(error)})
        return api_response(
            400, {"status": "error", "message": translate("error.validation")}
        )

    logger.exception("Unexpected error")
    return api_response(500, {"status": "error", "message": translate("error.internal")})


def _domain_error(
    error: DomainException, status_code: int, message_key: str, logger: Logger
) -> dict:
    if isinstance(error, SubjectNotFoundException) and error.booking_type:
        message_key = f"{message_key}.{error.booking_type}"

    logger.warning(
        "Request rejected",
        extra={
            "error_type": type(error).__name__,
            "booking_type": error.booking_type,
            "detail": str(error),
        },
    )
    body = {"status": "error", "message": translate(message_key)}
    if error.booking_type:
        body["booking_type"] = error.booking_type
    return api_response(status_code, body)

import json

from .i18n import active_locale


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する

    メッセージは GOTOUR_LOCALE の言語で返すため Content-Language を付ける。
    ベトナム語はエスケープせず UTF-8 のまま返す。
    """
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json; charset=utf-8",
            "Content-Language": active_locale(),
        },
        "body": json.dumps(body, default=str, ensure_ascii=False),
    }

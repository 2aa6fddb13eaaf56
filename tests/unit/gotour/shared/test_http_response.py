import json
from decimal import Decimal

from gotour.shared.utils import api_response


class TestApiResponse:
    def test_vietnamese_text_is_not_escaped(self, monkeypatch):
        monkeypatch.delenv("GOTOUR_LOCALE", raising=False)

        response = api_response(404, {"status": "error", "message": "Không tìm thấy"})

        assert response["statusCode"] == 404
        assert "Không tìm thấy" in response["body"]
        assert response["headers"]["Content-Type"] == "application/json; charset=utf-8"
        assert response["headers"]["Content-Language"] == "vi"

    def test_content_language_follows_locale(self, monkeypatch):
        monkeypatch.setenv("GOTOUR_LOCALE", "en")

        assert api_response(200, {})["headers"]["Content-Language"] == "en"

    def test_decimal_is_serialized_as_string(self):
        response = api_response(200, {"totalPrice": Decimal("1500000")})

        assert json.loads(response["body"]) == {"totalPrice": "1500000"}

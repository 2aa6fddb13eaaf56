from gotour.shared.utils import active_locale, translate


class TestTranslate:
    def test_default_locale_is_vietnamese(self, monkeypatch):
        monkeypatch.delenv("GOTOUR_LOCALE", raising=False)

        assert active_locale() == "vi"
        assert translate("booking.deleted") == "Đã xóa thông tin đặt chỗ thành công"

    def test_english_locale(self, monkeypatch):
        monkeypatch.setenv("GOTOUR_LOCALE", "en")

        assert translate("error.booking_not_found") == "Booking not found"

    def test_unknown_locale_falls_back_to_vietnamese(self, monkeypatch):
        monkeypatch.setenv("GOTOUR_LOCALE", "fr")

        assert active_locale() == "vi"

    def test_unknown_key_returns_key(self):
        assert translate("no.such.key", "en") == "no.such.key"

from datetime import date

import pytest

from gotour.hotel.domain.value_object import StayPeriod


class TestStayPeriod:
    def test_nights(self):
        period = StayPeriod(check_in=date(2024, 7, 1), check_out=date(2024, 7, 4))

        assert period.nights() == 3

    @pytest.mark.parametrize("check_out", [date(2024, 7, 1), date(2024, 6, 30)])
    def test_check_out_must_be_after_check_in(self, check_out):
        with pytest.raises(ValueError, match="Check-out"):
            StayPeriod(check_in=date(2024, 7, 1), check_out=check_out)

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """予約で扱う通貨（ISO 4217）

    VND は補助単位を持たないため整数で表示する。
    """

    # コード -> (表示記号, 小数桁数)
    DISPLAY: ClassVar[dict[str, tuple[str, int]]] = {
        "VND": ("đ", 0),
        "USD": ("USD", 2),
    }

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.strip().upper()
        if normalized not in self.DISPLAY:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.DISPLAY))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @property
    def symbol(self) -> str:
        return self.DISPLAY[self.code][0]

    @property
    def decimal_places(self) -> int:
        return self.DISPLAY[self.code][1]

    def format_vi(self, amount: Decimal) -> str:
        """ベトナム式の表記（桁区切りは「.」、小数点は「,」）

        VND は 1.500.000đ、それ以外は 1.200,50 USD の形式。
        """
        places = self.decimal_places
        rounded = amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
        text = f"{rounded:,.{places}f}".replace(",", " ").replace(".", ",").replace(" ", ".")
        if self.code == "VND":
            return f"{text}{self.symbol}"
        return f"{text} {self.symbol}"

    @classmethod
    def vnd(cls) -> Currency:
        return cls("VND")

    @classmethod
    def usd(cls) -> Currency:
        return cls("USD")

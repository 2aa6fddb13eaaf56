from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class Tour:
    """予約対象のツアー（カタログ側で管理される読み取り専用データ）"""

    id: str
    name: str
    price: Decimal = Decimal("0")
    duration: int = 0
    destination: str | None = None
    images: tuple[str, ...] = field(default_factory=tuple)
    cover_image: str | None = None

    @property
    def image(self) -> str | None:
        """代表画像"""
        if self.images:
            return self.images[0]
        return self.cover_image

    def to_snapshot(self) -> dict[str, Any]:
        """予約に埋め込むスナップショット"""
        return {
            "_id": self.id,
            "name": self.name,
            "price": self.price,
            "duration": self.duration,
            "destination": self.destination,
            "images": list(self.images),
            "coverImage": self.cover_image,
        }

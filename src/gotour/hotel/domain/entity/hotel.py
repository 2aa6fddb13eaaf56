from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class Room:
    """ホテルの客室タイプ"""

    id: str
    hotel_id: str
    name: str
    price: Decimal = Decimal("0")
    capacity: int = 0

    def to_snapshot(self) -> dict[str, Any]:
        """予約に埋め込むスナップショット"""
        return {
            "_id": self.id,
            "name": self.name,
            "price": self.price,
            "capacity": self.capacity,
        }


@dataclass(frozen=True)
class Hotel:
    """予約対象のホテル（カタログ側で管理される読み取り専用データ）"""

    id: str
    name: str
    city: str | None = None
    address: str | None = None
    images: tuple[str, ...] = field(default_factory=tuple)
    cover_image: str | None = None

    def to_snapshot(self) -> dict[str, Any]:
        """予約に埋め込むスナップショット"""
        return {
            "_id": self.id,
            "name": self.name,
            "city": self.city,
            "address": self.address,
            "images": list(self.images),
            "coverImage": self.cover_image,
        }

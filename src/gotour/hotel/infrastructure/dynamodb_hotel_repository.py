import os
from decimal import Decimal
from typing import Any

import boto3

from gotour.hotel.domain.entity import Hotel, Room
from gotour.hotel.domain.repository import HotelRepository


class DynamoDBHotelRepository(HotelRepository):
    """DynamoDBを使用したHotelRepository の具象実装

    ホテル: PK=HOTEL#<id>, SK=META / 客室: PK=HOTEL#<id>, SK=ROOM#<id>
    """

    def __init__(self, table_name: str | None = None, dynamodb: Any = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = dynamodb or boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, hotel_id: str) -> Hotel | None:
        """ホテルIDで検索"""
        response = self.table.get_item(Key={"PK": f"HOTEL#{hotel_id}", "SK": "META"})
        item = response.get("Item")
        if not item:
            return None
        return Hotel(
            id=hotel_id,
            name=item.get("name", ""),
            city=item.get("city"),
            address=item.get("address"),
            images=tuple(item.get("images") or ()),
            cover_image=item.get("coverImage"),
        )

    def find_room(self, hotel_id: str, room_id: str) -> Room | None:
        """ホテル内の客室を検索"""
        response = self.table.get_item(
            Key={"PK": f"HOTEL#{hotel_id}", "SK": f"ROOM#{room_id}"}
        )
        item = response.get("Item")
        if not item:
            return None
        return Room(
            id=room_id,
            hotel_id=hotel_id,
            name=item.get("name", ""),
            price=Decimal(str(item.get("price", 0))),
            capacity=int(item.get("capacity", 0)),
        )

import os
from decimal import Decimal
from typing import Any

import boto3

from gotour.tour.domain.entity import Tour
from gotour.tour.domain.repository import TourRepository


class DynamoDBTourRepository(TourRepository):
    """DynamoDBを使用したTourRepository の具象実装"""

    def __init__(self, table_name: str | None = None, dynamodb: Any = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = dynamodb or boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, tour_id: str) -> Tour | None:
        """ツアーIDで検索"""
        response = self.table.get_item(Key={"PK": f"TOUR#{tour_id}", "SK": "META"})
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def _to_entity(self, item: dict) -> Tour:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Tour(
            id=str(item.get("_id") or item["PK"].removeprefix("TOUR#")),
            name=item.get("name", ""),
            price=Decimal(str(item.get("price", 0))),
            duration=int(item.get("duration", 0)),
            destination=item.get("destination"),
            images=tuple(item.get("images") or ()),
            cover_image=item.get("coverImage"),
        )

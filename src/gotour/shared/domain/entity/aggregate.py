from datetime import datetime
from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下のエンティティへのアクセスは必ず集約ルートを経由
    - 作成日時は不変、更新日時は変更のたびに進める
    """

    def __init__(self, id: ID, created_at: datetime, updated_at: datetime) -> None:
        super().__init__(id)
        self._created_at = created_at
        self._updated_at = updated_at

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def touch(self, now: datetime) -> None:
        """更新日時を進める"""
        self._updated_at = now

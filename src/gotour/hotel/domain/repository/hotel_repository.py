from abc import ABC, abstractmethod

from gotour.hotel.domain.entity import Hotel, Room


class HotelRepository(ABC):
    """ホテル・客室の参照用レポジトリ"""

    @abstractmethod
    def find_by_id(self, hotel_id: str) -> Hotel | None:
        """ホテルIDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_room(self, hotel_id: str, room_id: str) -> Room | None:
        """ホテル内の客室を検索"""
        raise NotImplementedError

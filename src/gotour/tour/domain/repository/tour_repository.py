from abc import ABC, abstractmethod

from gotour.tour.domain.entity import Tour


class TourRepository(ABC):
    """ツアーの参照用レポジトリ"""

    @abstractmethod
    def find_by_id(self, tour_id: str) -> Tour | None:
        """ツアーIDで検索"""
        raise NotImplementedError

from .tour_repository import TourRepository as TourRepository

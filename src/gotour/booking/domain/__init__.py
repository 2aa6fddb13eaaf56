from .enum import BookingFilter as BookingFilter
from .enum import BookingStatus as BookingStatus
from .enum import BookingType as BookingType
from .enum import PaymentMethod as PaymentMethod
from .enum import PaymentStatus as PaymentStatus
from .value_object import BookingId as BookingId
from .value_object import BookingNumber as BookingNumber
from .value_object import BookingReference as BookingReference
from .value_object import PartySize as PartySize
from .entity import Booking as Booking
from .read_model import BookingView as BookingView
from .service import BookingNormalizer as BookingNormalizer
from .service import BookingStatusMachine as BookingStatusMachine
from .repository import BookingQuery as BookingQuery
from .repository import BookingRepository as BookingRepository
from .factory import BookingFactory as BookingFactory

from .booking_id import BookingId as BookingId
from .booking_number import BookingNumber as BookingNumber
from .booking_reference import BookingReference as BookingReference
from .party_size import PartySize as PartySize

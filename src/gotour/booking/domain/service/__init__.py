from .normalizer import BookingNormalizer as BookingNormalizer
from .normalizer import PLACEHOLDER_IMAGES as PLACEHOLDER_IMAGES
from .normalizer import ReferenceAssigner as ReferenceAssigner
from .normalizer import resolve_booking_type as resolve_booking_type
from .normalizer import resolve_duration as resolve_duration
from .normalizer import resolve_guest_count as resolve_guest_count
from .normalizer import resolve_id as resolve_id
from .normalizer import resolve_image as resolve_image
from .normalizer import resolve_name as resolve_name
from .normalizer import resolve_subject_id as resolve_subject_id
from .normalizer import resolve_total_price as resolve_total_price
from .normalizer import resolve_user_id as resolve_user_id
from .status_machine import BookingStatusMachine as BookingStatusMachine

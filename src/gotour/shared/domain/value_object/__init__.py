from .actor import Actor as Actor
from .currency import Currency as Currency
from .iso_date_time import IsoDateTime as IsoDateTime
from .iso_date_time import format_date as format_date
from .money import Money as Money
from .user_id import UserId as UserId

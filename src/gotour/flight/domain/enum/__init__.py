from .passenger import Gender as Gender
from .passenger import PassengerType as PassengerType
from .passenger import SeatClass as SeatClass
from .passenger import Title as Title

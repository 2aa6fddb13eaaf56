from enum import Enum


class PassengerType(str, Enum):
    """搭乗者区分"""

    ADULT = "adult"
    CHILD = "child"
    INFANT = "infant"


class Title(str, Enum):
    """敬称"""

    MR = "Mr"
    MRS = "Mrs"
    MS = "Ms"
    MISS = "Miss"
    MSTR = "Mstr"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class SeatClass(str, Enum):
    """座席クラス"""

    ECONOMY = "economy"
    PREMIUM_ECONOMY = "premium_economy"
    BUSINESS = "business"
    FIRST = "first"

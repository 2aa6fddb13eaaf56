from enum import Enum


class ActorRole(str, Enum):
    """操作者のロール"""

    USER = "user"
    ADMIN = "admin"

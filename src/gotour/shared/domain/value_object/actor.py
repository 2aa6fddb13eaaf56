from dataclasses import dataclass

from gotour.shared.domain.enum import ActorRole

from .user_id import UserId


@dataclass(frozen=True)
class Actor:
    """リクエストの操作者（認証コンテキストから供給される）"""

    user_id: UserId
    role: ActorRole = ActorRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == ActorRole.ADMIN

    @property
    def is_customer(self) -> bool:
        """予約を作成できる一般利用者かどうか"""
        return self.role == ActorRole.USER

    def owns(self, owner_id: UserId) -> bool:
        """指定ユーザーが所有するリソースかどうか"""
        return self.user_id == owner_id

    def can_manage(self, owner_id: UserId) -> bool:
        """所有者または管理者であれば操作できる"""
        return self.is_admin or self.owns(owner_id)

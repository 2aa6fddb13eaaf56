class DomainException(Exception):
    """ドメイン層で発生する基底例外

    予約種別（tour / hotel / flight）を保持したまま呼び出し元へ伝播させる。
    """

    def __init__(self, message: str = "", booking_type: str | None = None) -> None:
        super().__init__(message)
        self.booking_type = booking_type


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class SubjectNotFoundException(ResourceNotFoundException):
    """予約対象（ツアー・ホテル・フライト）が見つからない場合"""

    pass


class ForbiddenException(DomainException):
    """操作する権限（所有者・ロール）がない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合（現在の状態から遷移できない等）"""

    pass


class TerminalStateViolationException(BusinessRuleViolationException):
    """終端状態（completed）からステータスを遷移しようとした場合"""

    pass


class ValidationException(DomainException):
    """入力値が不正、または必須項目が欠けている場合"""

    pass


class InvalidStatusException(ValidationException):
    """予約ステータスが列挙値の範囲外の場合"""

    pass


class InvalidPaymentStatusException(ValidationException):
    """支払いステータスが列挙値の範囲外の場合"""

    pass


class UpstreamUnavailableException(DomainException):
    """外部データ提供元が利用できない場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（更新日時が期待値と異なる場合）"""

    pass

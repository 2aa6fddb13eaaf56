from decimal import Decimal


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def to_optional_decimal(v: object) -> Decimal | None:
    """None・空文字はそのまま None、それ以外は Decimal に変換する"""
    if v is None or v == "":
        return None
    return to_decimal(v)

from enum import Enum


class PaymentMethod(str, Enum):
    """支払い方法"""

    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    BANK_TRANSFER = "bank_transfer"
    PAYPAL = "paypal"
    MOMO = "momo"
    ZALOPAY = "zalopay"
    CASH = "cash"
    SEPAY = "sepay"
    OTHER = "other"

from enum import Enum


class SenderKind(str, Enum):
    INDIVIDUAL = "individual"
    COMPANY = "company"

    def __str__(self):
        return self.value


class ParcelType(str, Enum):
    DOCUMENT = "document"
    STANDARD = "standard"
    FRAGILE = "fragile"
    EXPRESS = "express"

    def __str__(self):
        return self.value


class ParcelOption(str, Enum):
    INSURANCE = "insurance"
    EXPRESS = "express"
    SIGNATURE = "signature"

    def __str__(self):
        return self.value


class QuoteStatus(str, Enum):
    RECEIVED = "received"

    def __str__(self):
        return self.value


class PaymentStatus(str, Enum):
    UNPAID = "unpaid"

    def __str__(self):
        return self.value

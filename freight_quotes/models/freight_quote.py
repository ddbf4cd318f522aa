from sqlalchemy import Column, String, Float, Boolean, Enum
from freight_quotes.models.base import BaseModel
from freight_quotes.core.enums import QuoteStatus, PaymentStatus


class FreightQuote(BaseModel):
    __tablename__ = "freight_quotes"

    id = Column(String(36), primary_key=True)
    created_by_user_id = Column(String(64), nullable=False, index=True)

    client_email = Column(String(255))
    client_name = Column(String(255))
    cargo_type = Column(String(20), nullable=False)
    volume_details = Column(String(64))

    quote_amount = Column(Float, nullable=False)
    quote_currency = Column(String(3), nullable=False, default="EUR")

    status = Column(Enum(QuoteStatus), default=QuoteStatus.RECEIVED, nullable=False)
    payment_status = Column(Enum(PaymentStatus), default=PaymentStatus.UNPAID, nullable=False)
    can_pay_online = Column(Boolean, default=True, nullable=False)

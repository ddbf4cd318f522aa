import math
import uuid
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from freight_quotes.core.config import settings
from freight_quotes.core.enums import ParcelType, ParcelOption
from freight_quotes.core.errors import InvalidRequest
from freight_quotes.schemas.quote import Parcel, QuoteBreakdown, QuoteResult

TYPE_MULTIPLIERS = {
    ParcelType.DOCUMENT: 1.0,
    ParcelType.STANDARD: 1.2,
    ParcelType.FRAGILE: 1.5,
    ParcelType.EXPRESS: 2.0,
}
BASE_FEE = 50.0
PER_KG_RATE = 5.0
INSURANCE_RATE = 0.02
EXPRESS_MULTIPLIER = 1.5
SIGNATURE_FEE = 10.0
EXPRESS_DELIVERY_DAYS = 3
STANDARD_DELIVERY_DAYS = 7
CENT = Decimal("0.01")


@dataclass(frozen=True)
class PricingConfig:
    base_fee: float = BASE_FEE
    per_kg_rate: float = PER_KG_RATE
    type_multipliers: Dict[ParcelType, float] = field(default_factory=lambda: dict(TYPE_MULTIPLIERS))
    insurance_rate: float = INSURANCE_RATE
    express_multiplier: float = EXPRESS_MULTIPLIER
    signature_fee: float = SIGNATURE_FEE
    express_delivery_days: int = EXPRESS_DELIVERY_DAYS
    standard_delivery_days: int = STANDARD_DELIVERY_DAYS
    currency: str = "EUR"


def get_pricing_config() -> PricingConfig:
    return PricingConfig(currency=settings.QUOTE_CURRENCY)


def round_half_up(total: float) -> Decimal:
    """Round to cents on the exact binary value, ties away from zero."""
    return Decimal(total).quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_quote(
    parcel: Parcel,
    config: Optional[PricingConfig] = None,
    now: Optional[datetime] = None,
) -> QuoteResult:
    """Price a parcel and estimate its delivery date.

    The type multiplier applies to the weight-adjusted subtotal only.
    Insurance and the signature fee are added flat afterwards, while the
    express option multiplies whatever has accumulated at that point, so an
    express parcel with the express option is charged both multipliers.
    """
    config = config or get_pricing_config()
    multiplier = config.type_multipliers.get(parcel.type)
    if multiplier is None:
        raise InvalidRequest(detail=f"No multiplier configured for parcel type {parcel.type}")

    weight_cost = parcel.weight_kg * config.per_kg_rate
    total = (config.base_fee + weight_cost) * multiplier

    if parcel.has_option(ParcelOption.INSURANCE):
        total += parcel.declared_value * config.insurance_rate
    if parcel.has_option(ParcelOption.EXPRESS):
        total *= config.express_multiplier
    if parcel.has_option(ParcelOption.SIGNATURE):
        total += config.signature_fee
    if not math.isfinite(total):
        raise InvalidRequest(detail=f"Quote total is not a finite amount for weight {parcel.weight_kg}")

    if parcel.has_option(ParcelOption.EXPRESS):
        days = config.express_delivery_days
    else:
        days = config.standard_delivery_days
    now = now or datetime.now(timezone.utc)

    return QuoteResult(
        quote_id=uuid.uuid4(),
        amount=float(round_half_up(total)),
        currency=config.currency,
        estimated_delivery=now + timedelta(days=days),
        breakdown=QuoteBreakdown(
            base=config.base_fee,
            weight=weight_cost,
            type_multiplier=multiplier,
            options=list(parcel.options),
        ),
    )

from freight_quotes.core.errors import InvalidRequest
from freight_quotes.schemas.quote import QuoteRequest, ValidatedQuoteRequest

REQUIRED_GROUPS = ("sender", "pickup", "delivery", "parcel")


def validate_quote_request(payload: QuoteRequest) -> ValidatedQuoteRequest:
    missing = [name for name in REQUIRED_GROUPS if getattr(payload, name) is None]
    if missing:
        raise InvalidRequest(detail=f"Missing request groups: {', '.join(missing)}")
    return ValidatedQuoteRequest(
        sender=payload.sender,
        pickup=payload.pickup,
        delivery=payload.delivery,
        parcel=payload.parcel,
    )

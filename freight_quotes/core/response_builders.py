from freight_quotes.schemas.quote import QuoteResult, QuoteResponse


def format_timestamp(value) -> str:
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_quote_response(result: QuoteResult) -> QuoteResponse:
    return QuoteResponse(
        quote_id=str(result.quote_id),
        price=result.price,
        currency=result.currency,
        estimated_delivery=format_timestamp(result.estimated_delivery),
        breakdown=result.breakdown,
    )

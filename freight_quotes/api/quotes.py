"""Freight quote request endpoint"""
import logging
from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import PlainTextResponse

from freight_quotes.core.config import CORS_ALLOWED_HEADERS
from freight_quotes.core.errors import QuoteServiceError, UnexpectedFailure
from freight_quotes.core.metrics import quotes_priced
from freight_quotes.core.response_builders import build_quote_response
from freight_quotes.core.security import Caller, get_current_caller
from freight_quotes.schemas.quote import QuoteRequest, QuoteResponse
from freight_quotes.services.pricing import PricingConfig, calculate_quote, get_pricing_config
from freight_quotes.services.quote_store import QuoteStore, build_quote_record, get_quote_store, persist_quote
from freight_quotes.services.validation import validate_quote_request

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/quotes", tags=["quotes"])

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": ", ".join(CORS_ALLOWED_HEADERS),
}


@router.options("/")
async def quote_preflight():
    return PlainTextResponse("ok", headers=PREFLIGHT_HEADERS)


@router.post("/", response_model=QuoteResponse)
async def request_quote(
    payload: QuoteRequest,
    background_tasks: BackgroundTasks,
    caller: Caller = Depends(get_current_caller),
    store: QuoteStore = Depends(get_quote_store),
    pricing: PricingConfig = Depends(get_pricing_config),
):
    quote_request = validate_quote_request(payload)

    try:
        result = calculate_quote(quote_request.parcel, pricing)
        response = build_quote_response(result)
    except QuoteServiceError:
        raise
    except Exception as e:
        logger.exception(f"Quote computation failed for user {caller.id}")
        raise UnexpectedFailure(detail=str(e)) from e

    quotes_priced.labels(parcel_type=str(quote_request.parcel.type)).inc()
    logger.info(f"Priced quote {response.quote_id} at {response.price} {response.currency} for user {caller.id}")

    # Runs after the response is sent; failures only reach the log.
    record = build_quote_record(quote_request, result, caller)
    background_tasks.add_task(persist_quote, store, record)

    return response

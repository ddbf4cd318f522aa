"""Best-effort storage of priced quotes"""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from freight_quotes.core.enums import QuoteStatus, PaymentStatus
from freight_quotes.core.errors import PersistenceFailure
from freight_quotes.core.metrics import track_db_operation, quote_persistence_failures
from freight_quotes.core.security import Caller
from freight_quotes.db.session import AsyncSessionLocal
from freight_quotes.models.freight_quote import FreightQuote
from freight_quotes.schemas.quote import QuoteResult, ValidatedQuoteRequest

logger = logging.getLogger(__name__)


class QuoteStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @track_db_operation("insert", "freight_quotes")
    async def save(self, record: FreightQuote) -> None:
        try:
            async with self._session_factory() as db:
                db.add(record)
                await db.commit()
        except SQLAlchemyError as e:
            raise PersistenceFailure(detail=str(e)) from e


def get_quote_store() -> QuoteStore:
    return QuoteStore(AsyncSessionLocal)


def build_quote_record(request: ValidatedQuoteRequest, result: QuoteResult, caller: Caller) -> FreightQuote:
    return FreightQuote(
        id=str(result.quote_id),
        created_by_user_id=caller.id,
        client_email=request.sender.email,
        client_name=request.sender.name,
        cargo_type=str(request.parcel.type),
        volume_details=f"{request.parcel.weight_kg:g} kg",
        quote_amount=result.amount,
        quote_currency=result.currency,
        status=QuoteStatus.RECEIVED,
        payment_status=PaymentStatus.UNPAID,
        can_pay_online=True,
    )


async def persist_quote(store: QuoteStore, record: FreightQuote) -> bool:
    """Store a quote, logging instead of raising when the write fails."""
    try:
        await store.save(record)
        logger.info(f"Stored quote {record.id} for user {record.created_by_user_id}")
        return True
    except Exception as e:
        quote_persistence_failures.inc()
        logger.error(f"Failed to store quote {record.id}: {e}", exc_info=True)
        return False

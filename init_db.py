import sys
import asyncio
from freight_quotes.db.session import engine
from freight_quotes.models.base import Base
from freight_quotes.models.freight_quote import FreightQuote  # noqa: F401


async def create_tables(drop_existing: bool = False) -> bool:
    try:
        async with engine.begin() as conn:
            if drop_existing:
                await conn.run_sync(Base.metadata.drop_all)
                print("Dropped existing tables")
            await conn.run_sync(Base.metadata.create_all)
        
        print(f"Tables ready: {', '.join(sorted(Base.metadata.tables))}")
        return True
        
    except Exception as e:
        print(f"Error creating tables: {str(e)}")
        return False
    finally:
        await engine.dispose()


def main():
    args = sys.argv[1:]
    if args and args != ["--drop"]:
        print("Usage: python init_db.py [--drop]")
        sys.exit(1)
    
    success = asyncio.run(create_tables(drop_existing=bool(args)))
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()

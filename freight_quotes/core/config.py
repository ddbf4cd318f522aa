from pydantic_settings import BaseSettings

CORS_ALLOWED_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


class Settings(BaseSettings):
    DATABASE_URL: str

    AUTH_JWT_SECRET: str
    AUTH_JWT_ALGORITHM: str = "HS256"
    AUTH_JWT_AUDIENCE: str = "authenticated"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    QUOTE_CURRENCY: str = "EUR"

    API_TITLE: str = "Freight Quote Service"
    API_DESCRIPTION: str = "Prices parcel shipments and records freight quotes"
    API_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()

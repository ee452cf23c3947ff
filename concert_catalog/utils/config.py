import os
from dotenv import load_dotenv

load_dotenv()

class Settings():
    DATABASE_URL: str = os.getenv('DATABASE_URL', 'sqlite:///./concert_catalog.db')
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    LOKI_URL: str | None = os.getenv('LOKI_URL')
    APP_ENV: str = os.getenv('APP_ENV', 'development')
    APP_NAME: str = os.getenv('APP_NAME', 'concert_catalog')
    OTLP_ENDPOINT: str | None = os.getenv('OTLP_ENDPOINT')
    HOST: str = os.getenv('HOST', '127.0.0.1')
    PORT: int = int(os.getenv('PORT', '8100'))

settings = Settings()

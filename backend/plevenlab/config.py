import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "PlevenLab API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # CORS origins for frontend (any origin, no credentials)
    CORS_ORIGINS: list[str] = ["*"]

    # Relational store (Tortoise URL format)
    database_url: str = os.getenv("DATABASE_URL", "sqlite://db.sqlite3")

    # Create missing tables on startup (single-node dev setups; use aerich otherwise)
    generate_schemas: bool = os.getenv("GENERATE_SCHEMAS", "false").lower() in ("1", "true", "yes")

    # Token signing secret (HS256 needs at least 32 bytes; no default on purpose)
    jwt_secret: str | None = os.getenv("JWT_SECRET")

    # Bootstrap administrator, created only when the user table is empty
    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_email: str = os.getenv("ADMIN_EMAIL", "admin@plevenlab.org")

settings = Settings()  # Instantiate configuration

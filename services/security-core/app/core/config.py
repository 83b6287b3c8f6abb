"""
Application configuration
"""
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Hosted store (Supabase / PostgREST)
    SUPABASE_URL: str = Field(
        default="",
        validation_alias=AliasChoices("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL"),
    )
    SUPABASE_ANON_KEY: str = Field(
        default="",
        validation_alias=AliasChoices("SUPABASE_ANON_KEY", "NEXT_PUBLIC_SUPABASE_ANON_KEY"),
    )
    SUPABASE_SERVICE_ROLE_KEY: str = ""
    STORE_TIMEOUT_SECONDS: float = 10.0

    # "rest" talks to the hosted store, "sql" connects to DATABASE_URL directly
    STORE_BACKEND: str = "rest"
    DATABASE_URL: str = ""

    # Admin bootstrap
    ADMIN_EMAIL: str = "admin@example.com"
    ADMIN_PASSWORD: str = ""
    ADMIN_NAME: str = "Admin"

    # Application
    APP_NAME: str = "security-core"
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Security
    ALLOWED_ORIGINS: str = "http://localhost:3000"

    @property
    def allowed_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @property
    def uses_sql_backend(self) -> bool:
        return self.STORE_BACKEND.strip().lower() == "sql"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Frontend variables share the same .env


settings = Settings()

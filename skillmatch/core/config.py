from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import PostgresDsn, computed_field
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    # Database credentials have no defaults - they must come from .env
    POSTGRES_USER: str
    POSTGRES_PASSWORD: str
    POSTGRES_DB: str = "postgres"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432

    @computed_field
    def DATABASE_URL(self) -> PostgresDsn:
        return PostgresDsn.build(
            scheme="postgresql+asyncpg",
            username=self.POSTGRES_USER,
            password=self.POSTGRES_PASSWORD,
            host=self.POSTGRES_HOST,
            port=self.POSTGRES_PORT,
            path=self.POSTGRES_DB,
        )

    # Supabase project used for access-token verification
    SUPABASE_URL: str
    SUPABASE_SERVICE_ROLE: str
    AUTH_TIMEOUT_SECONDS: int = 10

    CORS_ORIGINS: str = "*"  # Comma separated
    ENV: str = "production"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    @property
    def is_dev_mode(self) -> bool:
        return self.ENV.lower() in ["dev", "development", "local"]

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

settings = Settings()

"""Runtime configuration.

Values come from the environment (or ``.env``) and are grouped into sections;
nested keys use a double underscore, e.g. ``ORDERS__TRANSITION_POLICY=strict``
or ``DATABASE__URL=sqlite+aiosqlite:///./agromove.db``.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = "sqlite+aiosqlite:///./agromove.db"
    echo: bool = False
    # Only honoured by pooled server databases.
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None


class SecuritySettings(BaseModel):
    secret_key: str = Field(default="change-me", min_length=8)
    algorithm: str = "HS256"
    admin_roles: frozenset[str] = frozenset({"ADMIN", "SUPERADMIN"})

    @field_validator("admin_roles")
    @classmethod
    def _upper_roles(cls, roles: frozenset[str]) -> frozenset[str]:
        return frozenset(role.strip().upper() for role in roles if role.strip())


class WalletSettings(BaseModel):
    recent_transactions_limit: int = Field(default=50, ge=1)


class OrderSettings(BaseModel):
    default_page_size: int = Field(default=50, ge=1)
    max_page_size: int = Field(default=200, ge=1)
    # "any" keeps the historical behaviour of accepting every status change.
    transition_policy: Literal["any", "strict"] = "any"

    @model_validator(mode="after")
    def _check_page_sizes(self) -> "OrderSettings":
        if self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size cannot exceed max_page_size")
        return self


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: Literal["text", "json"] = "text"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "AgroMove Logistics API"
    api_prefix: str = "/api"

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    security: SecuritySettings = SecuritySettings()
    wallet: WalletSettings = WalletSettings()
    orders: OrderSettings = OrderSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def secret_key(self) -> str:
        return self.security.secret_key

    @property
    def algorithm(self) -> str:
        return self.security.algorithm

    @property
    def creates_schema_on_startup(self) -> bool:
        """Development and test runs build tables directly instead of via Alembic."""
        return self.environment in {"development", "test"}


@lru_cache()
def get_settings() -> Settings:
    return Settings()

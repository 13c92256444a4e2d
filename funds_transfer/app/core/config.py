from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import Dict

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_seed_accounts() -> Dict[int, Decimal]:
    return {1: Decimal("4.5"), 2: Decimal("3.5")}


class Settings(BaseSettings):
    app_name: str = "Funds Transfer API"
    log_level: str = "INFO"
    # Accounts loaded into the store at startup, keyed by account id.
    seed_accounts: Dict[int, Decimal] = Field(default_factory=_default_seed_accounts)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TRANSFER_",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from redemptions.identity.signature import REDEEM_MESSAGE

MAX_BASKET_SIZE = 30


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return str(raw).strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int, min_value: int | None = None) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        value = default
    else:
        value = int(raw)
    if min_value is not None:
        value = max(min_value, value)
    return value


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    data_dir: str = "./data"
    redeem_message: str = REDEEM_MESSAGE
    max_basket_size: int = MAX_BASKET_SIZE
    event_log_enabled: bool = True
    persist_basket: bool = False
    rpc_url: str = ""
    rpc_poa: bool = False
    rpc_timeout: int = 10


def load_settings(env_file: str | None = None) -> Settings:
    load_dotenv(env_file or os.environ.get("REDEMPTIONS_ENV_FILE", ".env"))
    return Settings(
        log_level=os.environ.get("LOG_LEVEL", "INFO").strip().upper(),
        data_dir=os.environ.get("DATA_DIR", "./data"),
        redeem_message=os.environ.get("REDEEM_MESSAGE", REDEEM_MESSAGE),
        max_basket_size=_env_int("MAX_BASKET_SIZE", MAX_BASKET_SIZE, min_value=1),
        event_log_enabled=_env_bool("EVENT_LOG_ENABLED", True),
        persist_basket=_env_bool("PERSIST_BASKET", False),
        rpc_url=os.environ.get("RPC_URL", "").strip(),
        rpc_poa=_env_bool("RPC_POA", False),
        rpc_timeout=_env_int("RPC_TIMEOUT", 10, min_value=1),
    )

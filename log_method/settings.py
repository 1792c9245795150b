from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CURRENT_ACTOR_ID_LABEL = "current_actor_id"


class LogMethodSettings(BaseSettings):
    """
    Environment-sourced defaults.

    Notes:
    - These only seed a fresh configuration (and `reset()`); anything the host
      sets on the configuration object afterwards wins.
    - Every variable is prefixed with LOG_METHOD_ (e.g. LOG_METHOD_LOGGER_NAME).
    """

    model_config = SettingsConfigDict(env_prefix="LOG_METHOD_", extra="ignore")

    # Name of the stdlib logger used as the default sink.
    logger_name: str = "log_method"
    current_actor_id_label: str = DEFAULT_CURRENT_ACTOR_ID_LABEL
    # Attribute looked up on subjects before falling back to `id`.
    external_identifier_method: Optional[str] = None
    max_breadcrumbs: int = Field(default=25, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> LogMethodSettings:
    return LogMethodSettings()

"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, modulectl.toml only contains
overrides. A fresh checkout needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from modulectl.domain.docs import DRIVERS_LIST_LINK, LANGUAGE_TABS
from modulectl.domain.products import DEFAULT_CATEGORIES

# --- modulectl.toml sections ---


class DocsConfig(BaseModel):
    """[docs] section."""

    model_config = {"frozen": True}

    drivers_list_link: str = DRIVERS_LIST_LINK
    language_tabs: list[str] = Field(default_factory=lambda: list(LANGUAGE_TABS))
    output: str = "driver.md"


class RegistryConfig(BaseModel):
    """[registry] section."""

    model_config = {"frozen": True}

    token_url: str = "https://moduware.au.auth0.com/oauth/token"
    audience: str = "https://api.moduware.com"
    api_url: str = "https://api.moduware.com/v1"
    credentials: str = "repository-user.json"
    categories: list[str] = Field(default_factory=lambda: list(DEFAULT_CATEGORIES))
    user_agent: str = "modulectl"
    timeout: float = 30.0


"""Product registration rules and models."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

SUCCESS = "success"

DEFAULT_CATEGORIES: tuple[str, ...] = ("module", "gateway")


class ClientCredentials(BaseModel):
    """OAuth client-credentials pair read from the local credentials file."""

    model_config = {"frozen": True, "populate_by_name": True}

    client_id: str = Field(alias="id")
    secret: str


class UnknownCategoryError(ValueError):
    """The product type does not map to a registrable category."""

    def __init__(self, product_type: str, category: str | None) -> None:
        self.product_type = product_type
        self.category = category
        super().__init__(f"Unknown product category: {category} (type {product_type!r})")


def product_category(product_type: str, allowed: Iterable[str] = DEFAULT_CATEGORIES) -> str:
    """Return the category segment of *product_type*.

    The category is the second dot-separated segment, e.g.
    ``moduware.module.led`` -> ``module``. Raises UnknownCategoryError
    when it is missing or not in *allowed*.
    """
    parts = product_type.split(".")
    category = parts[1] if len(parts) > 1 else None
    if category is None or category not in set(allowed):
        raise UnknownCategoryError(product_type, category)
    return category


def normalize_identifiers(lines: Iterable[str]) -> list[str]:
    """Lower-case identifiers, dropping blank lines."""
    return [line.strip().lower() for line in lines if line.strip()]


def format_progress(index: int, total: int) -> str:
    """Percent of the list processed before item *index*, e.g. ``05.0``."""
    percent = 100 * index / total if total else 0.0
    return f"{percent:04.1f}"

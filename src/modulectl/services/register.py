"""RegisterService — bulk product registration against the registry API.

Every identifier gets exactly one classified outcome; failures on one
product never stop the rest of the list. Setup failures (credentials,
identifier file, unknown category, token exchange) abort before any
product request is sent.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import httpx
import structlog

from modulectl.domain.errors import DriverError
from modulectl.domain.products import SUCCESS, UnknownCategoryError, product_category
from modulectl.infrastructure.filesystem import read_credentials, read_identifiers
from modulectl.infrastructure.registry import RegistryClient, TokenError
from modulectl.services.result import ServiceResult

if TYPE_CHECKING:
    from modulectl.config.models import RegistryConfig

logger = structlog.get_logger(__name__)

ResultCallback = Callable[[int, int, str, str], None]


class RegisterService:
    """Register product identifiers under one product type."""

    def __init__(
        self,
        config: RegistryConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    def _client(self) -> RegistryClient:
        return RegistryClient(
            token_url=self._config.token_url,
            api_url=self._config.api_url,
            audience=self._config.audience,
            user_agent=self._config.user_agent,
            timeout=self._config.timeout,
            transport=self._transport,
        )

    def register_products(
        self,
        product_type: str,
        identifiers_path: str | Path,
        *,
        credentials_path: str | Path | None = None,
        on_result: ResultCallback | None = None,
    ) -> ServiceResult:
        """Register every identifier in *identifiers_path* as *product_type*.

        *on_result* is called as ``(index, total, uuid, outcome)`` after
        each product. The result data carries ``stats``, a mapping from
        outcome to count in first-seen order.
        """
        op = "register_products"
        log = logger.bind(product_type=product_type)

        try:
            category = product_category(product_type, self._config.categories)
        except UnknownCategoryError as exc:
            return ServiceResult.failure(op, "UNKNOWN_CATEGORY", str(exc), type=product_type)

        creds_path = credentials_path or self._config.credentials
        try:
            credentials = read_credentials(creds_path)
            uuids = read_identifiers(identifiers_path)
        except DriverError as exc:
            return ServiceResult.failure(op, exc.code, str(exc))

        stats: Counter[str] = Counter()
        results: list[dict[str, str]] = []
        with self._client() as client:
            try:
                client.fetch_token(credentials)
            except TokenError as exc:
                return ServiceResult.failure(op, "TOKEN_ERROR", str(exc))

            total = len(uuids)
            for index, uuid in enumerate(uuids):
                outcome = client.register_product(uuid, product_type, category)
                log.debug("product registered", uuid=uuid, outcome=outcome)
                stats[outcome] += 1
                results.append({"uuid": uuid, "outcome": outcome})
                if on_result is not None:
                    on_result(index, total, uuid, outcome)

        warnings: list[str] = []
        failed = total - stats[SUCCESS]
        if failed:
            warnings.append(f"{failed} of {total} products were not registered")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "type": product_type,
                "category": category,
                "total": total,
                "stats": dict(stats),
                "results": results,
            },
            warnings=warnings,
        )

"""
PayNL REST client.

Thin wrapper around httpx for the two transaction endpoints the adapter uses.
Every call opens its own client; there is no connection reuse and no retry.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import httpx

from app.core.config import settings
from app.core.exceptions import GatewayTransportError
from app.schemas.paynl import TransactionStartBody

logger = logging.getLogger(__name__)

TRANSACTIONS_PATH = "/v2/transactions"


@dataclass(frozen=True)
class GatewayResponse:
    status_code: int
    text: str

    def json(self) -> Optional[Any]:
        """Parsed body, or None when the body is empty or not JSON."""
        if not self.text or not self.text.strip():
            return None
        try:
            return json.loads(self.text)
        except ValueError:
            return None


class PayNlClient:
    def __init__(
        self,
        username: str,
        password: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.auth = httpx.BasicAuth(username, password)
        self.base_url = (base_url or settings.PAYNL_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.PAYNL_TIMEOUT_SECONDS
        self.transport = transport

    async def _execute(
        self,
        method: str,
        path: str,
        payload: Optional[dict[str, Any]] = None,
    ) -> GatewayResponse:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                auth=self.auth,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                resp = await client.request(method, path, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"[paynl] {method} {path} failed: {e}")
            raise GatewayTransportError(
                f"PayNL request failed: {e}",
                details={"method": method, "path": path},
            ) from e

        logger.info(f"[paynl] {method} {path} — HTTP {resp.status_code}")
        return GatewayResponse(status_code=resp.status_code, text=resp.text)

    async def create_transaction(self, body: TransactionStartBody) -> GatewayResponse:
        return await self._execute(
            "POST",
            TRANSACTIONS_PATH,
            payload=body.model_dump(by_alias=True, mode="json"),
        )

    async def get_transaction(self, transaction_id: str) -> GatewayResponse:
        return await self._execute("GET", f"{TRANSACTIONS_PATH}/{quote(transaction_id, safe='')}")

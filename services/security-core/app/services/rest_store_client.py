"""
Hosted store client (PostgREST over HTTP)
"""
import httpx
import logging
from typing import Any, Dict, List, Optional

from app.services.store_client import (
    Embed,
    Order,
    Privilege,
    StoreClient,
    StoreFailure,
    StoreResult,
    TRANSPORT_ERROR_CODE,
)

logger = logging.getLogger(__name__)

OBJECT_MEDIA_TYPE = "application/vnd.pgrst.object+json"


class RestStoreClient(StoreClient):
    """Client for the hosted store's REST endpoint"""

    def __init__(
        self,
        url: str,
        api_key: str,
        privilege: Privilege = Privilege.RESTRICTED,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = f"{url.rstrip('/')}/rest/v1"
        self.privilege = privilege
        self.client = httpx.Client(
            base_url=self.base_url,
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order: Optional[List[Order]] = None,
        embed: Optional[List[Embed]] = None,
        single: bool = False,
    ) -> StoreResult:
        params = {"select": self._select_clause(embed)}
        params.update(self._filter_params(filters))
        if order:
            params["order"] = ",".join(
                f"{o.column}.{'asc' if o.ascending else 'desc'}" for o in order
            )
        headers = {"Accept": OBJECT_MEDIA_TYPE} if single else {}
        return self._send("GET", table, params=params, headers=headers)

    def insert(self, table: str, row: Dict[str, Any]) -> StoreResult:
        return self._send(
            "POST",
            table,
            json=row,
            headers={"Accept": OBJECT_MEDIA_TYPE, "Prefer": "return=representation"},
        )

    def update(self, table: str, values: Dict[str, Any], filters: Dict[str, Any]) -> StoreResult:
        return self._send(
            "PATCH",
            table,
            params=self._filter_params(filters),
            json=values,
            headers={"Accept": OBJECT_MEDIA_TYPE, "Prefer": "return=representation"},
        )

    def upsert(self, table: str, row: Dict[str, Any], on_conflict: str) -> StoreResult:
        return self._send(
            "POST",
            table,
            params={"on_conflict": on_conflict},
            json=row,
            headers={
                "Accept": OBJECT_MEDIA_TYPE,
                "Prefer": "return=representation,resolution=merge-duplicates",
            },
        )

    def close(self) -> None:
        self.client.close()

    @staticmethod
    def _select_clause(embed: Optional[List[Embed]]) -> str:
        clause = "*"
        for e in embed or []:
            clause += f",{e.alias}:{e.table}({','.join(e.columns)})"
        return clause

    @staticmethod
    def _filter_params(filters: Optional[Dict[str, Any]]) -> Dict[str, str]:
        params = {}
        for column, value in (filters or {}).items():
            if value is None:
                params[column] = "is.null"
            elif isinstance(value, bool):
                params[column] = f"is.{str(value).lower()}"
            else:
                params[column] = f"eq.{getattr(value, 'value', value)}"
        return params

    def _send(
        self,
        method: str,
        table: str,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> StoreResult:
        try:
            response = self.client.request(method, f"/{table}", params=params, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, table, e)
            return StoreResult(error=StoreFailure(message=str(e) or type(e).__name__, code=TRANSPORT_ERROR_CODE))

        if response.is_success:
            return StoreResult(data=response.json() if response.content else None)
        return StoreResult(error=self._decode_failure(response))

    @staticmethod
    def _decode_failure(response: httpx.Response) -> StoreFailure:
        """Turn a PostgREST error body {code, message, details, hint} into a StoreFailure"""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            return StoreFailure(
                message=body.get("message") or response.reason_phrase,
                code=body.get("code"),
                details=body.get("details"),
                hint=body.get("hint"),
                status=response.status_code,
            )
        return StoreFailure(message=response.text or response.reason_phrase, status=response.status_code)

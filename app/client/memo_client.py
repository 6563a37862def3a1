from typing import Any
from urllib.parse import quote

import httpx

from app.models.memo.responses import MemoListResponse, MemoResponse


class MemoApiError(Exception):
    """Raised when the memo API answers with a non-success status"""
    
    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(f"Request failed with {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class MemoClient:
    """Typed client for the memo HTTP API
    
    The caller owns the ``httpx.Client`` (base URL, timeouts, transport);
    any client pointing at the API root works, including FastAPI's TestClient.
    """
    
    def __init__(self, http_client: httpx.Client) -> None:
        self._http = http_client
    
    def list_memos(
        self,
        page: int | None = None,
        limit: int | None = None,
        query: str | None = None,
    ) -> MemoListResponse:
        params: dict[str, Any] = {}
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        if query and query.strip():
            params["query"] = query.strip()
        
        response = self._http.get("/memos", params=params)
        return MemoListResponse.model_validate(self._json(response))
    
    def get_memo(self, memo_id: str) -> MemoResponse:
        response = self._http.get(self._memo_path(memo_id))
        return MemoResponse.model_validate(self._json(response))
    
    def create_memo(self, title: str, body: str) -> MemoResponse:
        response = self._http.post("/memos", json={"title": title, "body": body})
        return MemoResponse.model_validate(self._json(response))
    
    def update_memo(self, memo_id: str, title: str | None = None, body: str | None = None) -> MemoResponse:
        patch = {key: value for key, value in {"title": title, "body": body}.items() if value is not None}
        response = self._http.put(self._memo_path(memo_id), json=patch)
        return MemoResponse.model_validate(self._json(response))
    
    def delete_memo(self, memo_id: str) -> None:
        response = self._http.delete(self._memo_path(memo_id))
        # Already gone counts as deleted
        if response.status_code == httpx.codes.NOT_FOUND:
            return
        self._raise_for_status(response)
    
    @staticmethod
    def _memo_path(memo_id: str) -> str:
        # IDs are opaque to the client; never let one escape its path segment
        return f"/memos/{quote(memo_id, safe='')}"
    
    def _json(self, response: httpx.Response) -> Any:
        self._raise_for_status(response)
        return response.json()
    
    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.is_success:
            return
        raise MemoApiError(response.status_code, response.text or response.reason_phrase)

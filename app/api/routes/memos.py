from typing import Annotated, Any

from fastapi import APIRouter, Body, HTTPException, Query, Response, status

from app.api.dependencies import MemoServiceDep
from app.core.errors import ERROR_MESSAGES
from app.models.memo.responses import ErrorResponse, MemoListResponse, MemoResponse
from app.models.memo.validation import validate_list_query, validate_memo_id

router = APIRouter(
    prefix="/memos",
    tags=["memos"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    },
)

_NOT_FOUND_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=ERROR_MESSAGES["NOT_FOUND"],
    )


@router.get("", response_model=MemoListResponse)
async def list_memos(
    response: Response,
    memo_service: MemoServiceDep,
    page: Annotated[str | None, Query(description="1-based page number, defaults to 1")] = None,
    limit: Annotated[str | None, Query(description="Page size, defaults to 20, capped at 100")] = None,
    query: Annotated[str | None, Query(description="Case-insensitive substring filter on title and body")] = None,
) -> MemoListResponse:
    # Raw strings so malformed numbers get the same error body as every other rule
    raw = {"page": page, "limit": limit, "query": query}
    args = validate_list_query({key: value for key, value in raw.items() if value is not None})
    memo_page = await memo_service.list(**args)
    response.headers["X-Total-Count"] = str(memo_page.total)
    return memo_page.to_response()


@router.get("/{memo_id}", response_model=MemoResponse, responses=_NOT_FOUND_RESPONSES)
async def get_memo(
    memo_id: str,
    memo_service: MemoServiceDep,
) -> MemoResponse:
    memo = await memo_service.get(validate_memo_id(memo_id))
    if memo:
        return memo.to_response()
    
    raise _not_found()


@router.post("", response_model=MemoResponse, status_code=status.HTTP_201_CREATED)
async def create_memo(
    memo_service: MemoServiceDep,
    payload: Annotated[Any, Body()] = None,
) -> MemoResponse:
    return (await memo_service.create(payload)).to_response()


@router.put("/{memo_id}", response_model=MemoResponse, responses=_NOT_FOUND_RESPONSES)
async def update_memo(
    memo_id: str,
    memo_service: MemoServiceDep,
    payload: Annotated[Any, Body()] = None,
) -> MemoResponse:
    memo = await memo_service.update(validate_memo_id(memo_id), payload)
    if memo:
        return memo.to_response()
    
    raise _not_found()


@router.delete("/{memo_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_NOT_FOUND_RESPONSES)
async def delete_memo(
    memo_id: str,
    memo_service: MemoServiceDep,
) -> Response:
    deleted = await memo_service.delete(validate_memo_id(memo_id))
    if not deleted:
        raise _not_found()
    
    return Response(status_code=status.HTTP_204_NO_CONTENT)

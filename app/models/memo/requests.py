from typing import Annotated

from pydantic import BaseModel, Field, PositiveInt, StringConstraints


TITLE_MAX_LENGTH = 150
BODY_MAX_LENGTH = 2000

# Whitespace is stripped before the length bounds are checked
TitleStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=TITLE_MAX_LENGTH)]
BodyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=BODY_MAX_LENGTH)]
QueryStr = Annotated[str, StringConstraints(strip_whitespace=True)]


class CreateMemoRequest(BaseModel):
    title: TitleStr = Field(..., description="Memo title")
    body: BodyStr = Field(..., description="Memo body")


class UpdateMemoRequest(BaseModel):
    # Omitted fields keep the default; an explicit null fails the string check
    title: TitleStr = Field(None, description="New title, if it should change")
    body: BodyStr = Field(None, description="New body, if it should change")


class ListMemosQuery(BaseModel):
    page: PositiveInt = Field(None, description="1-based page number")
    limit: PositiveInt = Field(None, description="Page size")
    query: QueryStr = Field(None, description="Case-insensitive substring filter")

from datetime import datetime
from pydantic import BaseModel


class HealthResponse(BaseModel):
    ok: bool
    app_name: str
    version: str
    memo_count: int
    timestamp: datetime

"""Response Envelope — the uniform {code, status, data} wrapper.

Invariants:
    - data is omitted entirely (not null) when there is nothing to return
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel


class WebResponse(BaseModel):
    """Envelope returned by every API action."""
    code: int
    status: str
    data: Any = None

    def to_content(self) -> dict:
        content = {"code": self.code, "status": self.status}
        if self.data is not None:
            content["data"] = jsonable_encoder(self.data)
        return content

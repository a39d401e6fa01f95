"""Problem details payload schemas shared by the mapper and finalizer."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict


class ProblemDetails(BaseModel):
    """RFC 7807 problem details value, immutable once constructed."""

    model_config = ConfigDict(frozen=True)

    type: str
    title: str
    detail: str
    status: int
    instance: str

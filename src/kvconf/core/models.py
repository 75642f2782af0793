from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


# ================================
# Unread-key reporting
# ================================


class UnreadKey(BaseModel):
    key: str = Field(..., min_length=1)
    line: int = Field(..., ge=1, description="1-based line the key was defined on")

    def __str__(self) -> str:
        return f"{self.key} ({self.line})"


class UnreadReport(BaseModel):
    """
    Keys present in a config file that nothing asked for.
    Ordering of `unread` carries no meaning.
    """

    source: Optional[str] = None
    unread: List[UnreadKey] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.unread

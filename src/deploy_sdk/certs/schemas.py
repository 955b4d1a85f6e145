"""Certificate schemas returned by the platform API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Certificate(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    uid: Optional[str] = None
    cns: List[str] = Field(default_factory=list)
    created: Optional[str] = None
    expiration: Optional[str] = None
    auto_renew: Optional[bool] = Field(default=None, alias="autoRenew")

"""
Orders API Schemas
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderStatusRequest(BaseModel):
    """New status label; any string is accepted"""
    model_config = ConfigDict(extra="ignore")

    status: Optional[str] = Field(default=None, description="e.g. Processing, Shipped")

"""
Catalog API Schemas
"""
from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class CategoryRequest(_Payload):
    """Create / rename a category"""

    name: Optional[str] = Field(default=None, description="Category name")


class ProductRequest(_Payload):
    """Create / update a product; presence is checked by the workflow"""

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Union[float, str]] = Field(default=None, description="Unit price")
    category: Optional[str] = Field(default=None, description="Category id")
    quantity: Optional[Union[int, str]] = Field(default=None, description="Units in stock")
    shipping: Optional[bool] = None


class ProductFilterRequest(_Payload):
    """Storefront filter panel state"""

    checked: List[str] = Field(default_factory=list, description="Selected category ids")
    radio: List[float] = Field(
        default_factory=list,
        max_length=2,
        description="Price range as [min, max]",
    )

"""
Pydantic models for records and statistics.

Numeric fields are declared as ``Union[int, float]`` because the store
coerces loosely typed input: whole numbers stay integers while
fractional values and NaN (from input that did not parse) are floats.
"""

from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field

Number = Union[int, float]


class UserRead(BaseModel):
    """A user record."""

    id: str = Field(..., example="V1StGX")
    name: str = Field(..., example="Ann")
    age: Number = Field(..., example=30)


class ProductRead(BaseModel):
    """A product record."""

    id: str = Field(..., example="V1StGX")
    name: str = Field(..., example="Smartphone")
    category: str = Field(..., example="Electronics")
    description: str = Field(..., example="128GB, black")
    price: Number = Field(..., example=89990)
    stock: Number = Field(..., example=10)


class UserStats(BaseModel):
    """Aggregates over the user store.

    ``averageAge`` is NaN (serialised as ``null``) when the store is empty.
    """

    total: int
    averageAge: float


class ProductStats(BaseModel):
    """Aggregates over the product store.

    ``avgPrice`` is ``totalValue / totalStock`` rounded to an integer; it
    is NaN or Infinity (serialised as ``null``) when ``totalStock`` is 0.
    """

    totalProducts: int
    totalStock: Number
    totalValue: Number
    categories: List[str]
    avgPrice: Number


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    error: str = Field(..., example="product not found")


class ServiceInfo(BaseModel):
    """Body of the root route."""

    message: str
    collection: str
    count: int
    routes: List[Dict[str, Any]]

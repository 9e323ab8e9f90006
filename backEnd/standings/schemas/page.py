"""Pagination envelope."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class PageMeta(BaseModel):
    """Pagination metadata for a filtered result set."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    total: int = Field(..., ge=0, description="Size of the filtered set before slicing")
    current_page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)


class Page(BaseModel, Generic[T]):
    """One page of items plus its metadata."""

    model_config = ConfigDict(frozen=True)

    items: list[T]
    meta: PageMeta

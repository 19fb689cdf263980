"""Response envelopes shared by every resource."""

from typing import Generic, TypeVar

from tofupilot.serialization import ApiModel

T = TypeVar("T")


class PaginationMeta(ApiModel):
    has_more: bool = False
    next_cursor: float | None = None


class PaginatedResponse(ApiModel, Generic[T]):
    """One page of a list endpoint.

    Load it parametrized, e.g. ``PaginatedResponse[Run]``, so the items in
    ``data`` are validated as the right model.
    """

    data: list[T] = []
    meta: PaginationMeta | None = None

    @property
    def has_more(self) -> bool:
        return self.meta.has_more if self.meta else False

    @property
    def next_cursor(self) -> float | None:
        return self.meta.next_cursor if self.meta else None


class DeleteResponse(ApiModel):
    id: str | None = None
    # Set instead of ``id`` for bulk deletes
    ids: list[str] | None = None

"""Pydantic schemas for listing records and API responses."""

from staymate.schemas.favorites import (  # noqa: F401
    DragOverResponse,
    DropRegion,
    DropResult,
    FavoritesResponse,
    TransferEnvelope,
)
from staymate.schemas.property import (  # noqa: F401
    AddedDate,
    Property,
    PropertyDetail,
    PropertyListResponse,
)
from staymate.schemas.search import SearchCriteria  # noqa: F401
from staymate.schemas.session import SessionSnapshot  # noqa: F401

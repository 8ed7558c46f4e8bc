import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

ORDER_BY_PUBLISHED_AT = "published_at"
ORDER_BY_CREATED_AT = "created_at"


@dataclass
class CreateOptions:
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class UpdateOptions:
    id: uuid.UUID
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class GetOneOptions:
    id: Optional[uuid.UUID] = None
    slug: Optional[str] = None
    status: Optional[str] = None


@dataclass
class ListOptions:
    status: Optional[str] = None
    category_slug: Optional[str] = None
    order_by: str = ORDER_BY_PUBLISHED_AT
    limit: int = 0
    with_tags: bool = True


@dataclass
class DeleteOptions:
    id: uuid.UUID


__all__ = [
    "ORDER_BY_PUBLISHED_AT",
    "ORDER_BY_CREATED_AT",
    "CreateOptions",
    "UpdateOptions",
    "GetOneOptions",
    "ListOptions",
    "DeleteOptions",
]

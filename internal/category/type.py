from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Optional

DEFAULT_CATEGORY_COLOR = "#2563eb"


@dataclass
class CategoryUseCaseConfig:
    default_color: str = DEFAULT_CATEGORY_COLOR


@dataclass
class CategoryView:
    """Category as listed to readers.

    posts_count, color and is_active are display defaults; nothing
    in storage backs them.
    """

    id: str
    name: str
    slug: str
    description: str = ""
    posts_count: int = 0
    color: str = DEFAULT_CATEGORY_COLOR
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


__all__ = ["CategoryUseCaseConfig", "CategoryView"]

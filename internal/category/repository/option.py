from dataclasses import dataclass
from typing import Optional


@dataclass
class GetOrCreateOptions:
    slug: str
    name: str
    description: Optional[str] = None


@dataclass
class ListOptions:
    limit: int = 0


__all__ = ["GetOrCreateOptions", "ListOptions"]

import uuid
from dataclasses import dataclass, field
from typing import List


@dataclass
class GetOrCreateOptions:
    slug: str
    name: str


@dataclass
class ReplacePostTagsOptions:
    post_id: uuid.UUID
    tag_ids: List[uuid.UUID] = field(default_factory=list)


__all__ = ["GetOrCreateOptions", "ReplacePostTagsOptions"]

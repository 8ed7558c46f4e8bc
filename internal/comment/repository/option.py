import uuid
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from ..type import CreateCommentInput


@dataclass
class CreateOptions:
    data: Union[CreateCommentInput, Mapping[str, Any]] = field(default_factory=dict)


@dataclass
class ListOptions:
    post_id: Optional[uuid.UUID] = None
    status: Optional[str] = None
    limit: int = 0


@dataclass
class UpdateStatusOptions:
    id: uuid.UUID
    status: str


__all__ = ["CreateOptions", "ListOptions", "UpdateStatusOptions"]

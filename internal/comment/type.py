from dataclasses import dataclass, asdict
from typing import Any


@dataclass
class CreateCommentInput:
    post_id: str
    author_name: str
    author_email: str
    content: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


__all__ = ["CreateCommentInput"]

from dataclasses import dataclass
from typing import Optional


@dataclass
class GetOrCreateOptions:
    user_id: str
    display_name: Optional[str] = None


__all__ = ["GetOrCreateOptions"]

from dataclasses import dataclass
from typing import Optional

from .constant import *


@dataclass(frozen=True)
class AuthUser:
    """Authenticated caller identity.

    Attributes:
        id: Unique id issued by the identity provider
        email: Contact address, when the provider exposes one
    """

    id: str
    email: Optional[str] = None

    def __post_init__(self):
        if not self.id or not str(self.id).strip():
            raise ValueError(ERROR_USER_ID_EMPTY)


__all__ = ["AuthUser"]

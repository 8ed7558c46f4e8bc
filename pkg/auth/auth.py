from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from .constant import *
from .interface import IAuthProvider
from .type import AuthUser

_current_user_var: ContextVar[Optional[AuthUser]] = ContextVar(
    CURRENT_USER_KEY, default=None
)


class ContextAuthProvider(IAuthProvider):
    """Auth provider reading the caller identity from the current context.

    The request handler verifies the caller's token and opens a session:

        with auth.session(AuthUser(id=claims["sub"], email=claims.get("email"))):
            await posts.create_post(data)
    """

    @contextmanager
    def session(self, user: Optional[AuthUser]) -> Iterator[None]:
        token = _current_user_var.set(user)
        try:
            yield
        finally:
            _current_user_var.reset(token)

    async def get_current_user(self) -> Optional[AuthUser]:
        return _current_user_var.get()


__all__ = ["ContextAuthProvider", "AuthUser"]

from typing import Optional
from pydantic import BaseModel

from hireme.core.errors import Unauthenticated


class Caller(BaseModel):
    """Identity of whoever issued the current request.

    Resolved once per request from the bearer token and passed explicitly
    into every service call. ``user_id`` is None for anonymous callers.
    """
    user_id: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def require_user(self) -> str:
        if self.user_id is None:
            raise Unauthenticated()
        return self.user_id

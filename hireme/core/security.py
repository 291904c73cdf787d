from typing import Optional

from fastapi import Header

from hireme.core.context import Caller
from hireme.core.errors import Unauthenticated
from hireme.core.logger import logger
from hireme.services.db_service import db_service


async def verify_access_token(token: str) -> str:
    """
    Ask Supabase Auth who owns the access token.
    Returns the user id; raises Unauthenticated for invalid or expired tokens.
    """
    client = await db_service.get_client()
    try:
        response = await client.auth.get_user(token)
    except Exception as e:
        logger.warning(f"⚠️ Access token rejected: {e}")
        raise Unauthenticated("Invalid or expired access token") from e

    if not response or not response.user:
        raise Unauthenticated("Invalid or expired access token")
    return response.user.id


async def get_caller(authorization: Optional[str] = Header(None)) -> Caller:
    """
    Resolve the request's caller from ``Authorization: Bearer <token>``.
    Requests without the header are anonymous; each operation decides
    whether that is allowed.
    """
    if not authorization:
        return Caller()

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise Unauthenticated("Authorization header must be 'Bearer <token>'")

    return Caller(user_id=await verify_access_token(token.strip()))

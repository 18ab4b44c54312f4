from fastapi import Depends, Header, HTTPException
from typing import Optional

async def current_user_id(
    x_user_id: str | None = Header(default=None),
) -> Optional[str]:
    """
    Resolve the caller identity from the 'X-User-Id' header.
    The gateway in front of the API verifies the session token and forwards the uid;
    we only trim it here. Returns None for anonymous callers.
    """
    if x_user_id is None:
        return None
    uid = x_user_id.strip()
    return uid or None

async def require_user_id(
    user_id: Optional[str] = Depends(current_user_id),
) -> str:
    """Same as current_user_id but rejects anonymous callers with 401."""
    if not user_id:
        raise HTTPException(status_code=401, detail="Must be authenticated")
    return user_id

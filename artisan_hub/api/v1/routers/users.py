# artisan_hub/api/v1/routers/users.py

from fastapi import APIRouter, Depends

from artisan_hub.api.deps import mongo_db
from artisan_hub.api.v1.schemas.accounts import UserProfileRequest
from artisan_hub.core.errors import upstream_failure
from artisan_hub.core.identity import require_user_id
from artisan_hub.domain.services.account_svc import create_user_profile, delete_user_data

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("/me", status_code=201)
async def save_profile(
    body: UserProfileRequest,
    user_id: str = Depends(require_user_id),
    db = Depends(mongo_db),
):
    logger.info(f"Request: save_profile user_id={user_id}")
    try:
        doc = await create_user_profile(
            db,
            user_id=user_id,
            email=body.email,
            name=body.name,
            phone_number=body.phone_number,
            profile_image=body.profile_image,
        )
    except Exception as e:
        logger.error(f"User profile write failed user_id={user_id}: {e}")
        raise upstream_failure("Failed to save user profile", e)
    return {"success": True, "data": doc}


@router.delete("/me")
async def delete_account(
    user_id: str = Depends(require_user_id),
    db = Depends(mongo_db),
):
    """Removes the profile and artisan record; the artisan's products are only deactivated."""
    logger.info(f"Request: delete_account user_id={user_id}")
    try:
        result = await delete_user_data(db, user_id=user_id)
    except Exception as e:
        logger.error(f"User data cleanup failed user_id={user_id}: {e}")
        raise upstream_failure("Failed to delete user data", e)
    return {"success": True, **result}

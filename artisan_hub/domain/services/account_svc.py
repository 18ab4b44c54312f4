import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

from artisan_hub.domain.services.constants import COL_ARTISANS, COL_PRODUCTS, COL_USERS, ROLE_BUYER

logger = logging.getLogger(__name__)


async def create_user_profile(
    db,
    *,
    user_id: str,
    email: Optional[str] = None,
    name: str = "",
    phone_number: str = "",
    profile_image: str = "",
) -> Dict[str, Any]:
    """Create (or overwrite) the 'users/<uid>' document with the default buyer role."""
    now = datetime.now(timezone.utc)
    doc = {
        "id": user_id,
        "email": email,
        "name": name or "",
        "phoneNumber": phone_number or "",
        "profileImage": profile_image or "",
        "role": ROLE_BUYER,
        "createdAt": now,
        "updatedAt": now,
    }
    await db[COL_USERS].replace_one({"id": user_id}, doc, upsert=True)
    logger.info("user profile saved user_id=%s", user_id)
    return doc


async def delete_user_data(db, *, user_id: str) -> Dict[str, int]:
    """
    Account removal: drop the user document and the artisan profile keyed by the
    same id, and mark that artisan's products inactive (they stay for order history).
    All three writes commit together or not at all (needs a replica set).
    """
    async with await db.client.start_session() as session:
        async with session.start_transaction():
            users = await db[COL_USERS].delete_one({"id": user_id}, session=session)
            artisans = await db[COL_ARTISANS].delete_one({"id": user_id}, session=session)
            products = await db[COL_PRODUCTS].update_many(
                {"artisanId": user_id},
                {"$set": {"isActive": False, "updatedAt": datetime.now(timezone.utc)}},
                session=session,
            )
    result = {
        "usersDeleted": users.deleted_count,
        "artisansDeleted": artisans.deleted_count,
        "productsDeactivated": products.modified_count,
    }
    logger.info("user data cleanup user_id=%s result=%s", user_id, result)
    return result


async def onboard_artisan(
    db,
    *,
    user_id: str,
    name: str,
    language: str,
    bio: str,
    bio_translated: str,
    location: str,
    profile_image: Optional[str] = None,
) -> Dict[str, Any]:
    """Store the artisan profile under the caller's id ('artisans/<uid>')."""
    doc = {
        "id": user_id,
        "userId": user_id,
        "name": name,
        "language": language,
        "bio": bio,
        "bioTranslated": bio_translated,
        "location": location,
        "profileImage": profile_image,
        "joinedAt": date.today().isoformat(),
        "updatedAt": datetime.now(timezone.utc),
    }
    await db[COL_ARTISANS].replace_one({"id": user_id}, doc, upsert=True)
    logger.info("artisan onboarded user_id=%s language=%s", user_id, language)
    return doc

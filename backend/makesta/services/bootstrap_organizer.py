"""Organizer Bootstrap — seeds the first organizer account at startup.

Invariants:
    - Runs only when both username and password are configured
    - Never overwrites an existing account (matched by username)
    - The password is hashed before it reaches the store and is never logged

Design Decisions:
    - Organizers cannot self-register; this seed is the only way one is created
"""

import logging

from makesta.config import Settings
from makesta.core.domain_types import Role
from makesta.core.repository_protocols import UserLike, UserStore
from makesta.infrastructure.credentials import hash_password

logger = logging.getLogger(__name__)


async def bootstrap_organizer(store: UserStore, settings: Settings) -> UserLike | None:
    """Create the configured organizer if missing. Returns the created user or None."""
    username = settings.bootstrap_organizer_username
    password = settings.bootstrap_organizer_password
    if not username or not password:
        return None

    if await store.get_by_username(username) is not None:
        logger.info(
            "Bootstrap organizer already exists", extra={"username": username},
        )
        return None

    user = await store.create(
        username=username,
        password_hash=hash_password(password),
        role=Role.ORGANIZER,
        full_name=settings.bootstrap_organizer_full_name,
        email=settings.bootstrap_organizer_email,
        phone=settings.bootstrap_organizer_phone,
    )
    logger.info(
        "Bootstrap organizer created",
        extra={"user_id": user.id, "username": username},
    )
    return user

"""Caller identity for profile/design routes.

Sessions are handled by the auth proxy in front of the service, which
forwards the signed-in user's id in ``X-Auth-Request-User`` (or
``X-Forwarded-User``). Requests without it are rejected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header

from cardstudio.config import Settings, get_settings
from cardstudio.errors import ActionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    id: str


def resolve_user_id(
    x_auth_request_user: Optional[str] = None,
    x_forwarded_user: Optional[str] = None,
) -> Optional[str]:
    for value in (x_auth_request_user, x_forwarded_user):
        if value and value.strip():
            return value.strip()
    return None


def require_user(
    x_auth_request_user: Optional[str] = Header(default=None),
    x_forwarded_user: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> CurrentUser:
    """Resolve the signed-in caller or raise UNAUTHORIZED."""
    user_id = resolve_user_id(x_auth_request_user, x_forwarded_user)
    if user_id is None and settings.dev_mode:
        user_id = settings.dev_user_id
    if user_id is None:
        logger.debug("Rejected request without an identity header")
        raise ActionError.unauthorized()
    return CurrentUser(id=user_id)

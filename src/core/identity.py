"""Request identity resolution.

Resolves the identity claimed by a request into a stored, active user before
any resource handler runs. Two transports are supported, selected by
``config.IDENTITY_MODE``:

- ``header``: the client sends its user id and role in two custom headers.
  This trusts the client and is only suitable for prototypes and trusted
  networks.
- ``token``: the client sends ``Authorization: Bearer <jwt>``; the token is
  signed by this server and its subject is the user id.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

import pytz
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

import config
from core.dependencies import UserManagerDep
from core.exceptions import UnauthorizedError
from schemas.user import User
from utils.converters import model_to_user

logger = logging.getLogger(__name__)

# auto_error=False so header mode can run without an Authorization header
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT access token for a user.

    Args:
        user_id: Subject of the token.
        expires_delta: Optional expiration time delta.

    Returns:
        Encoded JWT token string.
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(pytz.utc) + expires_delta
    return jwt.encode(
        {"sub": user_id, "exp": expire},
        config.JWT_SECRET_KEY,
        algorithm=config.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> str:
    """Verify a token and return its subject.

    Raises:
        UnauthorizedError: If the token is invalid, expired or has no subject.
    """
    try:
        payload = jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
    except JWTError:
        raise UnauthorizedError("Invalid authentication credentials")
    user_id = payload.get("sub")
    if not user_id:
        raise UnauthorizedError("Invalid authentication credentials")
    return user_id


def get_current_user(
    request: Request,
    user_manager: UserManagerDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> User:
    """Resolve the request's identity into an active user.

    Args:
        request: Incoming request (carries the identity headers).
        user_manager: Injected UserManager instance.
        credentials: Bearer credentials, used in token mode.

    Returns:
        The stored User, not merely the claimed id/role.

    Raises:
        UnauthorizedError: If identity is missing, the user does not exist,
            is not active, or (header mode) claims a role it does not hold.
    """
    claimed_role = None
    if config.IDENTITY_MODE == "token":
        if credentials is None:
            raise UnauthorizedError("No user info provided")
        user_id = decode_access_token(credentials.credentials)
    else:
        user_id = request.headers.get(config.USER_ID_HEADER)
        claimed_role = request.headers.get(config.USER_ROLE_HEADER)
        if not user_id or not claimed_role:
            raise UnauthorizedError("No user info provided")

    model = user_manager.get_user_by_id(user_id)
    if model is None or model.status != config.ACTIVE_STATUS:
        logger.warning("Rejected identity %s: unknown or inactive user", user_id)
        raise UnauthorizedError("Invalid or inactive user")
    if claimed_role is not None and claimed_role != model.role:
        logger.warning(
            "Rejected identity %s: claimed role %s, stored role %s",
            user_id, claimed_role, model.role,
        )
        raise UnauthorizedError("Invalid or inactive user")

    user_manager.touch_last_active(
        model, timedelta(seconds=config.LAST_ACTIVE_INTERVAL_SECONDS)
    )
    return model_to_user(model)

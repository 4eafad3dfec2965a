"""Session token lookup for routes."""

from fastapi import HTTPException, status

from board.domain.service import JWTService


def session_token(auth_token: str | None, authorization: str | None) -> str | None:
    """Pick the session token from the cookie or a Bearer header.

    Args:
        auth_token: Value of the ``auth_token`` cookie
        authorization: Value of the Authorization header

    Returns:
        The raw JWT, or None when neither carries one
    """
    if auth_token:
        return auth_token
    if authorization and authorization.lower().startswith("bearer "):
        return authorization[7:].strip() or None
    return None


def optional_user_id(
    jwt_service: JWTService, auth_token: str | None, authorization: str | None
) -> str | None:
    """Resolve the caller's user ID; invalid tokens count as anonymous."""
    return jwt_service.get_user_id_from_token(session_token(auth_token, authorization))


def require_user_id(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
    detail: str = "Authentication required",
) -> str:
    """Resolve the caller's user ID or fail with 401.

    Raises:
        HTTPException: If no valid session token was sent
    """
    user_id = optional_user_id(jwt_service, auth_token, authorization)
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
    return user_id

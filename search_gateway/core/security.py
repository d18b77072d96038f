import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from search_gateway.core.config import settings

basic = HTTPBasic(auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Authentication required",
        headers={"WWW-Authenticate": "Basic"},
    )


def require_user(credentials: HTTPBasicCredentials | None = Depends(basic)) -> str:
    """HTTP Basic gate for protected routes; returns the authenticated username."""
    if credentials is None:
        raise _unauthorized()

    expected = settings.AUTH_USERS.get(credentials.username)
    # compare_digest on both sides, whether or not the user exists
    supplied = credentials.password.encode("utf-8")
    ok = secrets.compare_digest(supplied, (expected or "").encode("utf-8"))
    if expected is None or not ok:
        raise _unauthorized()
    return credentials.username

# File: qa_auth/api/v1/routes_auth.py

"""
Auth API routes.

Login only reports the authentication decision. Issuing tokens or sessions
is left to whatever sits in front of this service.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from qa_auth.api.deps import get_auth_service
from qa_auth.schemas.auth import AuthStatus, LoginRequest, LoginResponse
from qa_auth.services.auth_service import AuthService

router = APIRouter()

INVALID_CREDENTIALS = "Invalid email or password."
ACCOUNT_LOCKED = "Account is locked."


@router.post("/login", response_model=LoginResponse, summary="User login")
def login(
    payload: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Check an email/password pair.

    Returns:
        200 with the account email on success
        423 if the account is locked
        401 for an unknown account or a wrong password (same body for both)
    """
    result = auth_service.authenticate(payload.email, payload.password)

    if result.status is AuthStatus.LOCKED:
        raise HTTPException(
            status_code=status.HTTP_423_LOCKED,
            detail=ACCOUNT_LOCKED,
        )
    if result.status is AuthStatus.INVALID:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
        )

    return LoginResponse(status=result.status, email=result.user.email)

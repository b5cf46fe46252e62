from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from venuebook.db.session import get_db
from venuebook.db.models import User
from venuebook.core.security import verify_password, create_access_token, rate_limit, make_key
from venuebook.core.config import RATE_LIMITS
from venuebook.services.audit import log_action
from venuebook.schemas.auth import LoginRequest, LoginResponse

router = APIRouter(prefix="/auth", tags=["Auth"])

"""
AUTH ROUTES => EMAIL + PASSWORD LOGIN

Issues a JWT carrying the user's id and role. Login attempts are rate
limited per IP and email, and admin logins are audit logged.
"""

#Authenticate via email and password and issue a role-scoped JWT
@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    email = payload.email.strip().lower()

    limit, window = RATE_LIMITS["login"]
    if not rate_limit(make_key(request, f"login:{email}"), limit, window):
        raise HTTPException(status_code=429, detail="Too many login attempts")

    user = db.query(User).filter(User.email == email).first()

    if not user or not verify_password(payload.password, user.hashed_password):
        log_action(
            db=db,
            actor_type="system",
            actor_id=None,
            action="auth.login_failed",
            details=f"email={email}",
        )
        raise HTTPException(status_code=401, detail="Invalid credentials")

    if user.role == "admin":
        log_action(
            db=db,
            actor_type="admin",
            actor_id=user.id,
            action="admin.login_success",
        )

    token = create_access_token(
        {
            "sub": str(user.id),
            "role": user.role,
        }
    )

    return {
        "success": True,
        "token": token,
        "user": user,
    }

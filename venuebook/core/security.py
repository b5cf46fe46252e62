from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from time import time

from venuebook.core.config import settings, SESSION_LIFETIME_DAYS

SECRET_KEY = settings.JWT_SECRET_KEY
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE = timedelta(days=SESSION_LIFETIME_DAYS)
#Keys never expire, the store grows with every new IP and login email
_RATE_LIMIT_STORE = {}

pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, hashed_password: str) -> bool:
    return pwd_context.verify(password, hashed_password)

def create_access_token(data: dict) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + ACCESS_TOKEN_EXPIRE
    to_encode.update({"exp": expire})

    return jwt.encode(
        to_encode,
        SECRET_KEY,
        algorithm=ALGORITHM,
    )

#Returns None for tampered or expired tokens
def decode_access_token(token: str) -> dict | None:
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None

def rate_limit(key: str, max_requests: int, window_seconds: int) -> bool:
    now = time()
    timestamps = _RATE_LIMIT_STORE.get(key, [])

    timestamps = [t for t in timestamps if now - t < window_seconds]

    if len(timestamps) >= max_requests:
        _RATE_LIMIT_STORE[key] = timestamps
        return False

    timestamps.append(now)
    _RATE_LIMIT_STORE[key] = timestamps
    return True

def reset_rate_limits() -> None:
    _RATE_LIMIT_STORE.clear()

def make_key(request, endpoint: str) -> str:
    ip = request.client.host if request.client else "unknown"
    return f"{endpoint}:{ip}"

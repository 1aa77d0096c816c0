import hashlib
import hmac
import logging
import secrets
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from reelgen.db.models import AuthToken, User
from reelgen.db.session import get_db
from reelgen.errors import (
    AuthRequired,
    InvalidCredentials,
    PersistenceFailure,
    UserAlreadyExists,
)

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 200_000


# ----------------------------
# Passwords
# ----------------------------

def hash_password(password: str, salt: Optional[bytes] = None) -> str:
    salt = salt or secrets.token_bytes(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"pbkdf2_sha256${PBKDF2_ITERATIONS}${salt.hex()}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    try:
        _, iterations, salt_hex, digest_hex = stored.split("$")
        digest = hashlib.pbkdf2_hmac(
            "sha256",
            password.encode("utf-8"),
            bytes.fromhex(salt_hex),
            int(iterations),
        )
    except ValueError:
        return False
    return hmac.compare_digest(digest.hex(), digest_hex)


# ----------------------------
# Sign-up / sign-in / sign-out
# ----------------------------

def _user_by_email(db: Session, email: str) -> Optional[User]:
    try:
        return db.query(User).filter(User.email == email).first()
    except SQLAlchemyError as e:
        logger.error("Error looking up user: %s", e)
        raise PersistenceFailure("Error looking up account") from e


def sign_up(db: Session, email: str, password: str, display_name: Optional[str] = None) -> User:
    email = email.strip().lower()

    if _user_by_email(db, email) is not None:
        raise UserAlreadyExists()

    user = User(
        email=email,
        display_name=display_name,
        password_hash=hash_password(password),
    )
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError as e:
        db.rollback()
        raise UserAlreadyExists() from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error creating user %s: %s", email, e)
        raise PersistenceFailure("Error creating account") from e

    logger.info("User registered: %s", user.id)
    return user


def sign_in(db: Session, email: str, password: str) -> tuple[str, User]:
    """Returns (access_token, user) or raises InvalidCredentials."""
    user = _user_by_email(db, email.strip().lower())
    if user is None or not verify_password(password, user.password_hash):
        raise InvalidCredentials()

    token = secrets.token_urlsafe(32)
    try:
        db.add(AuthToken(token=token, user_id=user.id))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error creating session for %s: %s", user.id, e)
        raise PersistenceFailure("Error signing in") from e

    return token, user


def sign_out(db: Session, token: str) -> None:
    try:
        db.query(AuthToken).filter(AuthToken.token == token).delete()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error revoking session: %s", e)
        raise PersistenceFailure("Error signing out") from e


def user_for_token(db: Session, token: str) -> Optional[User]:
    try:
        return (
            db.query(User)
            .join(AuthToken, AuthToken.user_id == User.id)
            .filter(AuthToken.token == token)
            .one_or_none()
        )
    except SQLAlchemyError as e:
        logger.error("Error resolving session: %s", e)
        raise PersistenceFailure("Error checking session") from e


# ----------------------------
# FastAPI dependencies
# ----------------------------

def bearer_token(authorization: Optional[str] = Header(default=None)) -> str:
    if not authorization:
        raise AuthRequired()

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthRequired()
    return token.strip()


def current_user(
    token: str = Depends(bearer_token),
    db: Session = Depends(get_db),
) -> User:
    user = user_for_token(db, token)
    if user is None:
        raise AuthRequired()
    return user

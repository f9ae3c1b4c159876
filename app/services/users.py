"""
User onboarding and the one-time set-password flow.

New users never choose a password at registration. They receive an email
with a single-use link; the account only survives if that email was sent.
"""

import logging
from datetime import datetime

from pymongo.errors import DuplicateKeyError

from app.utils.email import send_set_password_email
from app.utils.errors import Conflict, DependencyFailure, InvalidToken
from app.utils.security import generate_temp_password, get_password_hash, verify_password
from app.utils.tokens import fingerprint, issue_reset_token, verify_reset_token

logger = logging.getLogger(__name__)

PUBLIC_FIELDS = {"name": 1, "email": 1, "role": 1}


async def list_users(db):
    users = await db.users.find({}, PUBLIC_FIELDS).sort("_id", -1).to_list(None)
    return [
        {
            "id": str(user["_id"]),
            "name": user.get("name"),
            "email": user.get("email"),
            "role": user.get("role"),
        }
        for user in users
    ]


async def register_user(db, name: str, email: str, role: str, send_mail=None) -> str:
    """Create the user and email them a set-password link.

    If the email cannot be sent the new row is deleted again and
    DependencyFailure is raised.
    """
    existing_user = await db.users.find_one({"email": email})
    if existing_user:
        raise Conflict()

    send_mail = send_mail or send_set_password_email

    secret, token_fingerprint, expires = issue_reset_token()
    user_doc = {
        "name": name,
        "email": email,
        "role": role,
        "password": get_password_hash(generate_temp_password()),
        "password_reset_token": token_fingerprint,
        "password_reset_expires": expires,
        "created_at": datetime.utcnow(),
    }

    try:
        result = await db.users.insert_one(user_doc)
    except DuplicateKeyError:
        raise Conflict()

    try:
        sent = await send_mail(email=email, token=secret, name=name)
    except Exception:
        logger.exception("Set-password email to %s raised", email)
        sent = False

    if not sent:
        await db.users.delete_one({"_id": result.inserted_id})
        logger.warning("Onboarding of %s rolled back: set-password email not sent", email)
        raise DependencyFailure("Failed to send the set-password email. The user was not created.")

    logger.info("User %s onboarded with role %s", result.inserted_id, role)
    return str(result.inserted_id)


async def set_password(db, token: str, password: str):
    """Consume a set-password token and store the new password hash.

    The update only matches while the token is still on the row, so a token
    can be consumed once even under concurrent requests.
    """
    token_fingerprint = fingerprint(token) if token else None
    user = await db.users.find_one({"password_reset_token": token_fingerprint}) if token_fingerprint else None

    if not user or not verify_reset_token(
        token, user.get("password_reset_token"), user.get("password_reset_expires")
    ):
        raise InvalidToken()

    hashed_password = get_password_hash(password)
    result = await db.users.update_one(
        {"_id": user["_id"], "password_reset_token": token_fingerprint},
        {"$set": {
            "password": hashed_password,
            "password_reset_token": None,
            "password_reset_expires": None,
            "password_set_at": datetime.utcnow(),
        }},
    )
    if result.modified_count == 0:
        raise InvalidToken()


async def authenticate(db, email: str, password: str):
    """Return the user for valid credentials, else None."""
    user = await db.users.find_one({"email": email})
    if not user or not verify_password(password, user.get("password")):
        return None
    return user

import os
import secrets

from passlib.context import CryptContext

from app.utils.errors import InvalidInput

# 1. THE KEYS
SECRET_KEY = os.getenv("SECRET_KEY", "super_secret_random_key_CHANGE_THIS")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 30))

# 2. THE PASSWORD TOOLS (Argon2, cost tunable per deployment)
PASSWORD_HASH_ROUNDS = int(os.getenv("PASSWORD_HASH_ROUNDS", 2))

pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__rounds=PASSWORD_HASH_ROUNDS,
)


def verify_password(plain_password, hashed_password):
    """Checks if the typed password matches the saved hash."""
    if not plain_password or not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # not a hash this context knows how to read
        return False


def get_password_hash(password):
    """Converts a plain password into a salted one-way hash."""
    if not password:
        raise InvalidInput("Password must not be empty")
    return pwd_context.hash(password)


def generate_temp_password():
    """Random placeholder credential for accounts that have not set a password yet."""
    return secrets.token_hex(20)

import hashlib
import hmac
import secrets

ITERATIONS = 190_000


def _derive(password: str, salt: str) -> str:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), ITERATIONS).hex()


def hash_password(password: str) -> str:
    """Returns "salt$hash" for storage."""
    salt = secrets.token_hex(16)
    return f"{salt}${_derive(password, salt)}"


def verify_password(password: str, stored: str) -> bool:
    salt, sep, expected = (stored or "").partition("$")
    if not sep:
        return False
    return hmac.compare_digest(_derive(password or "", salt), expected)

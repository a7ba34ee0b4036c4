"""SHA-256 content addressing and domain password hashing"""

import hashlib
import secrets


BLOB_ID_PREFIX = "sha256-"
PBKDF2_ITERATIONS = 200_000


def sha256_bytes(data: bytes) -> str:
    """Return hex-encoded SHA-256 digest of data (64 lowercase chars)."""
    return hashlib.sha256(data).hexdigest()


def blob_id(data: bytes) -> str:
    """Content address for raw bytes: 'sha256-<hex digest>'."""
    return f"{BLOB_ID_PREFIX}{sha256_bytes(data)}"


def hash_password(password: str, salt: str = None) -> str:
    """Return 'pbkdf2_sha256$<iterations>$<salt>$<hex>' for password."""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), PBKDF2_ITERATIONS)
    return f"pbkdf2_sha256${PBKDF2_ITERATIONS}${salt}${digest.hex()}"


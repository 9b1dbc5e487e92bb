# utils/auth.py
import base64
import binascii
import hashlib
import hmac
import secrets
from dataclasses import dataclass
from typing import Optional

import httpx
from postgrest.exceptions import APIError

from config.settings import TABLES
from utils.errors import LookupFailure, NotFound, Unauthorized, ValidationError
from utils.logging_utils import get_logger

logger = get_logger(__name__)

# ----------------------------
# Password Hashing (PBKDF2)
# Stored format:
# pbkdf2_sha256$<iterations>$<salt_b64>$<hash_b64>
# ----------------------------
PBKDF2_ALGORITHM = "pbkdf2_sha256"
PBKDF2_ITERATIONS = 180_000

INVALID_CREDENTIALS = "Invalid username or password"


def hash_password(password: str) -> str:
    salt = secrets.token_bytes(16)
    dk = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt,
        PBKDF2_ITERATIONS,
        dklen=32
    )
    salt_b64 = base64.b64encode(salt).decode("utf-8")
    dk_b64 = base64.b64encode(dk).decode("utf-8")
    return f"{PBKDF2_ALGORITHM}${PBKDF2_ITERATIONS}${salt_b64}${dk_b64}"


def is_hashed(stored: str) -> bool:
    return (stored or "").startswith(PBKDF2_ALGORITHM + "$")


def _verify_pbkdf2(password: str, stored: str) -> bool:
    try:
        _algo, iters, salt_b64, dk_b64 = stored.split("$", 3)
        iters = int(iters)
        salt = base64.b64decode(salt_b64.encode("utf-8"), validate=True)
        dk_expected = base64.b64decode(dk_b64.encode("utf-8"), validate=True)
    except (ValueError, binascii.Error):
        logger.warning("Malformed PBKDF2 hash in credential store")
        return False

    dk = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt,
        iters,
        dklen=len(dk_expected)
    )
    return hmac.compare_digest(dk, dk_expected)


def verify_password(password: str, stored: str) -> bool:
    """
    Checks a submitted password against the stored secret.

    PBKDF2 hashes are verified properly. Anything else is a legacy
    plaintext secret (rows created before hashing was introduced); it is
    still accepted but compared in constant time, and a warning asks
    for the row to be rehashed with scripts/hash_password.py.
    """
    stored = str(stored or "")
    if not stored:
        return False
    if is_hashed(stored):
        return _verify_pbkdf2(password, stored)

    logger.warning("Plaintext secret in credential store; rehash it with scripts/hash_password.py")
    return hmac.compare_digest(password.encode("utf-8"), stored.encode("utf-8"))


# ----------------------------
# Records
# ----------------------------
@dataclass(frozen=True)
class SuperAdminUser:
    id: str
    name: str
    username: str


@dataclass(frozen=True)
class AdminMember:
    id: str
    name: str
    mobile: str
    is_approved: Optional[bool]
    is_active: Optional[bool]

    @classmethod
    def from_row(cls, row: dict) -> "AdminMember":
        return cls(
            id=row.get("id"),
            name=row.get("name"),
            mobile=row.get("mobile"),
            is_approved=row.get("is_approved"),
            is_active=row.get("is_active"),
        )


# ----------------------------
# Lookups
# ----------------------------
def _first_row(query):
    """
    Runs a limit(1) query and returns its first row, or None.
    With duplicate keys the row the store returns first wins.
    """
    try:
        res = query.execute()
    except (APIError, httpx.HTTPError) as e:
        logger.error("Credential lookup failed: %s", e)
        raise LookupFailure("Failed to verify credentials") from e
    rows = res.data or []
    return rows[0] if rows else None


def get_super_admin_by_username(client, username: str):
    username = (username or "").strip()
    return _first_row(
        client.table(TABLES["super_admins"])
        .select("id, name, username, password_hash")
        .eq("username", username)
        .limit(1)
    )


def get_admin_member_by_mobile(client, mobile: str):
    mobile = (mobile or "").strip()
    return _first_row(
        client.table(TABLES["admin_members"])
        .select("id, name, mobile, is_approved, is_active")
        .eq("mobile", mobile)
        .limit(1)
    )


# ----------------------------
# Gates
# ----------------------------
def login_super_admin(client, username: str, password: str) -> SuperAdminUser:
    """
    Validates username + password against super_admins.
    Missing user and wrong password give the same message.
    """
    if not (username or "").strip() or not (password or "").strip():
        raise ValidationError("Please enter both username and password", title="Missing Credentials")

    row = get_super_admin_by_username(client, username)
    if not row:
        logger.info("Super admin login rejected: no matching account")
        raise Unauthorized(INVALID_CREDENTIALS)

    if not verify_password(password.strip(), row.get("password_hash")):
        logger.info("Super admin login rejected for id=%s", row.get("id"))
        raise Unauthorized(INVALID_CREDENTIALS)

    logger.info("Super admin login succeeded for id=%s", row.get("id"))
    return SuperAdminUser(id=row.get("id"), name=row.get("name"), username=row.get("username"))


def login_team_admin(client, mobile: str, uniform_errors: bool = False) -> AdminMember:
    """
    Looks up an admin member by mobile number and admits them only when
    approved and active. There is no password for this role.

    With uniform_errors an unknown number is reported like a bad
    credential instead of as "not found".
    """
    if not (mobile or "").strip():
        raise ValidationError("Please enter your mobile number", title="Mobile Required")

    row = get_admin_member_by_mobile(client, mobile)
    if not row:
        logger.info("Team admin login rejected: no matching account")
        if uniform_errors:
            raise Unauthorized("Invalid mobile number")
        raise NotFound("No team admin found with this mobile number")

    member = AdminMember.from_row(row)

    if not member.is_approved:
        logger.info("Team admin login rejected for id=%s: not approved", member.id)
        raise Unauthorized(
            "Your account is pending approval. Please contact Super Admin.",
            title="Not Approved",
        )

    if not member.is_active:
        logger.info("Team admin login rejected for id=%s: inactive", member.id)
        raise Unauthorized(
            "Your account has been deactivated. Please contact Super Admin.",
            title="Account Inactive",
        )

    logger.info("Team admin login succeeded for id=%s", member.id)
    return member

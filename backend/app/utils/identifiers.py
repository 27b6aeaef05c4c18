import secrets
import string
import uuid

ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 8


def generate_id() -> str:
    """
    Short base-36 identifier for a resume record.
    Uniqueness is enforced when the record is appended to the RecordStore.
    """
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


def make_object_key() -> str:
    """Random object-store key; unique across concurrent uploads."""
    return uuid.uuid4().hex


def make_session_id() -> str:
    """Opaque handle for a stored applicant context."""
    return secrets.token_urlsafe(16)

import re
import uuid

_UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def generate_uuid() -> str:
    return str(uuid.uuid4())


def is_valid_uuid(value: str) -> bool:
    """
    Only the canonical 8-4-4-4-12 hex form is accepted, braces, urn prefixes and
    hyphen-less forms are rejected.
    """
    if not isinstance(value, str):
        return False
    return _UUID_PATTERN.fullmatch(value) is not None

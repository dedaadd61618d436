import hashlib


def fingerprint(canonical: str) -> str:
    """SHA-256 hex digest of the UTF-8 encoding of a canonical string."""
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()

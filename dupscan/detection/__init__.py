from dupscan.detection.canonicalizer import canonicalize
from dupscan.detection.classifier import TEXT_EXTENSIONS, is_text_file, non_printable_ratio
from dupscan.detection.encoding import normalize_encoding
from dupscan.detection.fingerprint import fingerprint

__all__ = [
    "TEXT_EXTENSIONS",
    "canonicalize",
    "fingerprint",
    "is_text_file",
    "non_printable_ratio",
    "normalize_encoding",
]

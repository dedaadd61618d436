"""Decoding of raw upload bytes into text."""


def normalize_encoding(raw: bytes) -> str:
    """Decode raw bytes to text. Never raises.

    Strict UTF-8 is tried first. Bytes that are not valid UTF-8 fall back to
    Latin-1, which maps every byte to one character: lossless at the byte
    level, though multi-byte text in other encodings will render wrong.
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        pass

    try:
        return raw.decode("latin-1")
    except UnicodeDecodeError:
        return raw.decode("utf-8", errors="replace")

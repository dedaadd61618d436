"""dupscan: finds duplicate text files by canonical content fingerprint."""

__version__ = "0.1.0"

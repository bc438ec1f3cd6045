"""
Secret handling services.
"""

from .redaction import MASK, redact_password

__all__ = ["MASK", "redact_password"]

"""
Credential redaction for podman error messages.

A failed podman call reports its full command line, so the password given to
`podman login -p <password>` ends up in the error text.
"""

MASK = "*****"

# Separators podman error messages use between "-p" and its value
_SEPARATORS = (" ", ", ", ",")


def redact_password(message: str, password: str) -> str:
    """
    Replace every "-p <password>" in message with "-p *****".

    Matching is literal, so passwords containing regex metacharacters
    are handled like any other string.
    """
    if not password:
        return message

    redacted = message
    for sep in _SEPARATORS:
        redacted = redacted.replace(f"-p{sep}{password}", f"-p {MASK}")
    return redacted

"""
Services for podbuild.

The podman/ subpackage holds the command execution subsystem; logging and
secret redaction support it.
"""

"""
Unit tests for password redaction.
"""

from podbuild.services.secrets.redaction import MASK, redact_password


class TestRedactPassword:
    def test_space_separated(self):
        message = "executed command [podman login reg -u bob -p secr3t! --tls-verify=true]"

        redacted = redact_password(message, "secr3t!")

        assert "secr3t!" not in redacted
        assert "-p *****" in redacted

    def test_comma_separated(self):
        message = "executed command [podman, login, reg, -u, bob, -p, secr3t!]"

        redacted = redact_password(message, "secr3t!")

        assert "secr3t!" not in redacted
        assert redacted.endswith("-p *****]")

    def test_every_occurrence(self):
        message = "-p pw first, then -p pw again"

        assert redact_password(message, "pw") == f"-p {MASK} first, then -p {MASK} again"

    def test_regex_metacharacters_are_literal(self):
        password = "(.*)+[a-z]{2}|\\d$"
        message = f"login failed: podman login -p {password}"

        assert redact_password(message, password) == "login failed: podman login -p *****"

    def test_unrelated_text_untouched(self):
        message = "Error: authenticating creds for reg: invalid username/password"

        assert redact_password(message, "hunter2") == message

    def test_empty_password_is_noop(self):
        assert redact_password("-p  x", "") == "-p  x"

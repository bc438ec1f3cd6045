"""
Unit tests for podman value types.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from podbuild.core.exceptions import ConfigValidationError, EmptyOutputError
from podbuild.core.models.podman import (
    ExecutionResult,
    ImageBuildSpec,
    PodmanCommand,
    StorageOptions,
    TlsPolicy,
)


class TestTlsPolicy:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, TlsPolicy.ENFORCE),
            (False, TlsPolicy.SKIP),
            (None, TlsPolicy.UNSPECIFIED),
            ("true", TlsPolicy.ENFORCE),
            ("FALSE", TlsPolicy.SKIP),
            ("not_specified", TlsPolicy.UNSPECIFIED),
            (TlsPolicy.SKIP, TlsPolicy.SKIP),
        ],
    )
    def test_parse(self, value, expected):
        assert TlsPolicy.parse(value) is expected

    def test_parse_rejects_garbage(self):
        with pytest.raises(ConfigValidationError):
            TlsPolicy.parse("maybe")

    @pytest.mark.parametrize("value", [1, 0, 1.5, ["true"]])
    def test_parse_rejects_non_string(self, value):
        with pytest.raises(ConfigValidationError, match="boolean or a string"):
            TlsPolicy.parse(value)

    def test_flags(self):
        assert TlsPolicy.ENFORCE.flag == "--tls-verify=true"
        assert TlsPolicy.SKIP.flag == "--tls-verify=false"
        assert TlsPolicy.UNSPECIFIED.flag is None


class TestPodmanCommand:
    def test_tokens(self):
        assert PodmanCommand.PODMAN.token == "podman"
        assert PodmanCommand.RMI.token == "rmi"


class TestImageBuildSpec:
    def test_frozen(self):
        spec = ImageBuildSpec(containerfile=Path("Containerfile"))

        with pytest.raises(ValidationError):
            spec.no_cache = True

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            ImageBuildSpec(containerfile=Path("Containerfile"), target="prod")


class TestExecutionResult:
    def test_last_line(self):
        result = ExecutionResult(lines=("a", "b", "sha256:abcd1234"))

        assert result.last_line() == "sha256:abcd1234"

    def test_last_line_empty(self):
        with pytest.raises(EmptyOutputError) as exc_info:
            ExecutionResult().last_line(command="build")

        assert exc_info.value.context["command"] == "build"

    def test_last_line_only_blank(self):
        with pytest.raises(EmptyOutputError):
            ExecutionResult(lines=("", "   ")).last_line()


class TestStorageOptions:
    def test_empty(self):
        assert StorageOptions().to_args() == []

    def test_both(self):
        options = StorageOptions(root=Path("/a"), run_root=Path("/b"))

        assert options.to_args() == ["--root=/a", "--runroot=/b"]

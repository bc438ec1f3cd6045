"""
Podman executor service.

One method per podman operation. Each method assembles its arguments,
has the CommandDecorator build the full command, runs it through the
process runner, and interprets the result.
"""

from collections.abc import Sequence
from pathlib import Path

from ...core.exceptions import (
    AbnormalExitError,
    LaunchFailureError,
    PodbuildExecutionError,
    RegistryLoginError,
)
from ...core.interfaces.logger import ILogger
from ...core.interfaces.runner import ICommandRunner
from ...core.models.podman import ImageBuildSpec, PodmanCommand, TlsPolicy
from ..logging import NullLogger
from ..secrets.redaction import redact_password
from .decorator import CommandDecorator
from .runner import ProcessRunner

SAVE_FORMAT_CMD = "--format=oci-archive"
OUTPUT_CMD = "--output"
DOCKERFILE_CMD = "--file="
NO_CACHE_CMD = "--no-cache="
BUILD_CONTEXT = "."


class PodmanExecutorService:
    """
    Runs podman build, tag, save, push, login and rmi.

    The TLS policy and working directory are fixed at construction; every
    call builds a fresh command and starts its own process.

    Usage:
        service = PodmanExecutorService(logger, TlsPolicy.ENFORCE)
        image_id = service.build(ImageBuildSpec(containerfile=Path("Containerfile")))
        service.tag(image_id, "registry.example.com/app:1.0")
        service.push("registry.example.com/app:1.0")
    """

    def __init__(
        self,
        logger: ILogger | None = None,
        tls_policy: TlsPolicy = TlsPolicy.UNSPECIFIED,
        runner: ICommandRunner | None = None,
        decorator: CommandDecorator | None = None,
        working_dir: Path = Path("."),
    ) -> None:
        """
        Initialize the executor service.

        Args:
            logger: Log sink, also used for podman's streamed output
            tls_policy: Whether TLS verification is enforced, skipped or left to podman
            runner: Executes the commands (defaults to a ProcessRunner on the same logger)
            decorator: Builds the argument vectors
            working_dir: Directory every podman process runs in
        """
        self._logger = logger or NullLogger()
        self._tls_policy = tls_policy
        self._runner = runner or ProcessRunner(self._logger)
        self._decorator = decorator or CommandDecorator()
        self._working_dir = working_dir

    @property
    def tls_policy(self) -> TlsPolicy:
        return self._tls_policy

    @property
    def working_dir(self) -> Path:
        return self._working_dir

    def build(self, spec: ImageBuildSpec) -> str:
        """
        Implementation of 'podman build'.

        Args:
            spec: The Containerfile to build and the cache setting

        Returns:
            The last line of the build output, which podman uses for the image id

        Raises:
            EmptyOutputError: If podman printed no output to read the id from
        """
        sub_command = [
            f"{DOCKERFILE_CMD}{spec.containerfile}",
            f"{NO_CACHE_CMD}{str(spec.no_cache).lower()}",
            BUILD_CONTEXT,
        ]

        # podman build writes STEP progress to stderr
        result = self._run(PodmanCommand.BUILD, sub_command, capture_stderr=False)
        return result.last_line(command=PodmanCommand.BUILD.token)

    def tag(self, image_hash: str, full_image_name: str) -> None:
        """Implementation of 'podman tag'. Output is ignored."""
        self._run(PodmanCommand.TAG, [image_hash, full_image_name])

    def save(self, archive_name: str | Path, full_image_name: str) -> None:
        """
        Implementation of 'podman save'.

        This is not an export: the archive is an OCI layout with every
        layer kept separately.
        """
        sub_command = [SAVE_FORMAT_CMD, OUTPUT_CMD, str(archive_name), full_image_name]
        self._run(PodmanCommand.SAVE, sub_command)

    def push(self, full_image_name: str) -> None:
        """Implementation of 'podman push'. Output is ignored."""
        # Pushing blobs prints "Copying blob ..." progress on stderr.
        self._run(PodmanCommand.PUSH, [full_image_name], capture_stderr=False)

    def login(self, registry: str, username: str, password: str) -> None:
        """
        Implementation of 'podman login'.

        Raises:
            RegistryLoginError: If login fails. The message never contains the password.
        """
        sub_command = [registry, "-u", username, "-p", password]

        try:
            self._run(PodmanCommand.LOGIN, sub_command)
        except (AbnormalExitError, LaunchFailureError) as e:
            # The failed command line is part of the message; drop the password
            # and do not chain the original exception.
            message = redact_password(e.message, password)
            self._logger.error("%s", message)
            exit_code = e.process_exit_code if isinstance(e, AbnormalExitError) else None
            raise RegistryLoginError(
                message,
                exit_code=exit_code,
                context={"registry": registry},
            ) from None

    def remove_local_image(self, full_image_name: str) -> None:
        """Implementation of 'podman rmi': removes an image from local storage."""
        self._run(PodmanCommand.RMI, [full_image_name])

    def _run(
        self,
        command: PodmanCommand,
        sub_command: Sequence[str],
        capture_stderr: bool = True,
    ):
        invocation = self._decorator.decorate(command, self._tls_policy, sub_command)
        try:
            return self._runner.execute(self._working_dir, invocation.argv, capture_stderr)
        except PodbuildExecutionError:
            self._logger.debug("Command %s failed", invocation.display_name)
            raise

"""
Command decorator.

Turns a logical podman command and its operation-specific arguments into the
complete argument vector, adding the flags each command accepts.
"""

from collections.abc import Sequence
from types import MappingProxyType

from ...core.models.podman import (
    CommandFlag,
    CommandInvocation,
    PodmanCommand,
    StorageOptions,
    TlsPolicy,
)

# tag, save and rmi only touch local storage; podman rejects --tls-verify there.
COMMAND_CAPABILITIES = MappingProxyType(
    {
        PodmanCommand.BUILD: frozenset({CommandFlag.TLS_VERIFY}),
        PodmanCommand.PUSH: frozenset({CommandFlag.TLS_VERIFY}),
        PodmanCommand.LOGIN: frozenset({CommandFlag.TLS_VERIFY}),
        PodmanCommand.TAG: frozenset(),
        PodmanCommand.SAVE: frozenset(),
        PodmanCommand.RMI: frozenset(),
    }
)


def supports(command: PodmanCommand, flag: CommandFlag) -> bool:
    """Whether the given command accepts the given conditional flag."""
    return flag in COMMAND_CAPABILITIES.get(command, frozenset())


class CommandDecorator:
    """
    Builds podman argument vectors.

    Output layout:
        podman [--root=.. --runroot=..] <subcommand> [--tls-verify=..] <extra args>

    Usage:
        decorator = CommandDecorator()
        invocation = decorator.decorate(PodmanCommand.PUSH, TlsPolicy.SKIP, ["img:1"])
    """

    def __init__(self, storage: StorageOptions | None = None) -> None:
        self._storage = storage or StorageOptions()

    def decorate(
        self,
        command: PodmanCommand,
        tls_policy: TlsPolicy,
        extra_args: Sequence[str],
    ) -> CommandInvocation:
        """
        Build the full argument vector for one podman call.

        Args:
            command: Subcommand to run (must not be PodmanCommand.PODMAN)
            tls_policy: TLS verification policy
            extra_args: Operation arguments, kept in the given order

        Returns:
            A new CommandInvocation
        """
        if command is PodmanCommand.PODMAN:
            raise ValueError("PODMAN is the binary, not a subcommand")

        argv = [PodmanCommand.PODMAN.token]
        argv.extend(self._storage.to_args())
        argv.append(command.token)

        if tls_policy.flag is not None and supports(command, CommandFlag.TLS_VERIFY):
            argv.append(tls_policy.flag)

        argv.extend(extra_args)
        return CommandInvocation(command=command, argv=tuple(argv))

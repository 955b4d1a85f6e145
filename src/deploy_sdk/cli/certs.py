"""`deploy certs add`: register a certificate from local files or for a list of CNs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from deploy_sdk.certs import CertError, create_cert_for_cns, create_cert_from_file
from deploy_sdk.cli.config import ExecutionContext
from deploy_sdk.cli.output import Output, get_command_name, stamp
from deploy_sdk.client import APIClient
from deploy_sdk.errors import NotAuthorized, TeamDeleted
from deploy_sdk.scope import get_scope

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

FILE_MODE_USAGE = "certs add --crt <domain.crt> --key <domain.key> --ca <ca.crt>"
CN_MODE_USAGE = "certs add <cn>[, <cn>]"
INVALID_ARGS_MESSAGE = "Invalid number of arguments to create a custom certificate entry. Usage:"


@dataclass(frozen=True)
class CommandOptions:
    overwrite: bool = False
    debug: bool = False
    crt_path: str | None = None
    key_path: str | None = None
    ca_path: str | None = None

    @property
    def file_mode(self) -> bool:
        return bool(self.crt_path or self.key_path or self.ca_path)

    @property
    def has_all_files(self) -> bool:
        return bool(self.crt_path and self.key_path and self.ca_path)


def parse_cns(args: Iterable[str]) -> list[str]:
    """Split comma-separated arguments into CNs, keeping order and duplicates."""
    cns: list[str] = []
    for arg in args:
        cns.extend(token.strip() for token in arg.split(",") if token.strip())
    return cns


def _usage_error(output: Output, usage: str) -> int:
    output.error(INVALID_ARGS_MESSAGE)
    output.print(f"  {get_command_name(usage)}\n", style="cyan")
    return EXIT_FAILURE


def certs_add(
    context: ExecutionContext,
    options: CommandOptions,
    args: Sequence[str],
    output: Output,
) -> int:
    """Add a certificate from local files or for the given CNs and return the exit code."""
    add_stamp = stamp()

    with APIClient(
        api_url=context.api_url,
        token=context.token,
        current_team=context.current_team,
        debug=options.debug,
    ) as client:
        try:
            scope = get_scope(client)
        except (NotAuthorized, TeamDeleted) as exc:
            output.error(str(exc))
            return EXIT_FAILURE
        output.debug(f"resolved scope {scope.context_name}")

        if options.overwrite:
            output.error("Overwrite option is deprecated")
            return EXIT_FAILURE

        if options.file_mode:
            if len(args) != 0 or not options.has_all_files:
                return _usage_error(output, FILE_MODE_USAGE)

            result = create_cert_from_file(
                client,
                options.key_path,
                options.crt_path,
                options.ca_path,
            )
        else:
            output.warn(
                f"{get_command_name('certs add')} will be soon deprecated. "
                f"Please use {get_command_name('certs issue <cn> <cns>')} instead"
            )
            cns = parse_cns(args)
            if not cns:
                return _usage_error(output, CN_MODE_USAGE)

            stop_spinner = output.spinner(f"Generating a certificate for {', '.join(cns)}")
            try:
                result = create_cert_for_cns(client, cns, scope.context_name)
            finally:
                stop_spinner()

    if isinstance(result, CertError):
        output.error(result.message)
        return EXIT_FAILURE

    output.success(f"Certificate entry for {', '.join(result.cns)} created {add_stamp()}")
    return EXIT_SUCCESS

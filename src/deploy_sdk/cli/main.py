"""Command-line interface for deploy."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version
from typing import Sequence

from deploy_sdk.cli.certs import CommandOptions, certs_add
from deploy_sdk.cli.config import ConfigError, build_execution_context, load_cli_config
from deploy_sdk.cli.output import Output
from deploy_sdk.errors import APIUnavailableError

EXIT_SUCCESS = 0
EXIT_VALIDATION_ERROR = 1
EXIT_NETWORK_ERROR = 2

_SENSITIVE_FIELDS = (
    "token",
    "authorization",
    "key",
    "secret",
)


def _sdk_version() -> str:
    try:
        return pkg_version("deploy-sdk")
    except PackageNotFoundError:
        return "0.0.0+local"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="deploy")
    parser.add_argument(
        "--version",
        action="version",
        version=f"deploy {_sdk_version()}",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to CLI config TOML (default: ~/.deploy/config.toml)",
    )
    parser.add_argument("--token", default=None, help="Login token override")
    parser.add_argument("--team", default=None, help="Team id override")
    parser.add_argument("--api", default=None, help="Platform API URL override")
    parser.add_argument("--debug", action="store_true", help="Log API requests to stderr")

    sub = parser.add_subparsers(dest="command", required=True)

    certs = sub.add_parser("certs", help="Manage TLS certificates")
    certs_sub = certs.add_subparsers(dest="certs_command", required=True)
    add = certs_sub.add_parser(
        "add",
        help="Add a certificate from local files or issue one for the given CNs",
    )
    add.add_argument("cns", nargs="*", help="Common names, optionally comma separated")
    add.add_argument("--crt", default=None, help="Path to the certificate file")
    add.add_argument("--key", default=None, help="Path to the private key file")
    add.add_argument("--ca", default=None, help="Path to the CA chain file")
    add.add_argument("--overwrite", action="store_true", help=argparse.SUPPRESS)

    return parser


def _sanitize_error_text(value: str) -> str:
    redacted = re.sub(r"(?i)(bearer\s+)(\S+)", r"\1[REDACTED]", value)
    for field in _SENSITIVE_FIELDS:
        redacted = re.sub(
            rf"(?i)({field}\s*[=:]\s*)([^,\s]+)",
            r"\1[REDACTED]",
            redacted,
        )
    redacted = re.sub(r"(?i)([?&](?:token|secret)=)([^&\s]+)", r"\1[REDACTED]", redacted)
    return redacted


def _print_error(stderr, prefix: str, message: str, *, code: int) -> int:
    print(f"{prefix}: {_sanitize_error_text(message)}", file=stderr)
    return code


def _configure_logging(debug: bool, stderr) -> None:
    if not debug:
        return
    handler = logging.StreamHandler(stderr)
    handler.setFormatter(logging.Formatter("> [debug] %(name)s: %(message)s"))
    root = logging.getLogger("deploy_sdk")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG)


def _run_certs_add(*, args, context, stdout, stderr) -> int:
    options = CommandOptions(
        overwrite=args.overwrite,
        debug=args.debug,
        crt_path=args.crt,
        key_path=args.key,
        ca_path=args.ca,
    )
    output = Output(stdout, stderr, debug=args.debug)
    try:
        return certs_add(context, options, args.cns, output)
    except APIUnavailableError as exc:
        return _print_error(stderr, "api error", str(exc), code=EXIT_NETWORK_ERROR)


def main(argv: Sequence[str] | None = None, *, stdout=sys.stdout, stderr=sys.stderr) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_cli_config(args.config)
    except ConfigError as exc:
        return _print_error(stderr, "config error", str(exc), code=EXIT_VALIDATION_ERROR)

    _configure_logging(args.debug, stderr)
    context = build_execution_context(config, token=args.token, team=args.team, api_url=args.api)

    if args.command == "certs":
        if args.certs_command == "add":
            return _run_certs_add(args=args, context=context, stdout=stdout, stderr=stderr)

    print("unknown command", file=stderr)
    return EXIT_VALIDATION_ERROR


if __name__ == "__main__":
    raise SystemExit(main())

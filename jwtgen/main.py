# jwtgen/main.py
import argparse
import logging
import sys
from typing import Sequence, TextIO, get_args

from pydantic import ValidationError

from jwtgen import commands
from jwtgen.config import LogLevel, get_settings
from jwtgen.errors import JwtGenError
from jwtgen.telemetry.logging_setup import setup_logging

log = logging.getLogger(__name__)

LOG_LEVELS = get_args(LogLevel)


def build_parser(default_principal: str, default_log_level: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        "jwtgen", description="Generate internal JWTs and call a coordinator with them."
    )
    p.add_argument(
        "--log-level",
        default=default_log_level.upper(),
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level for diagnostics written to stderr",
    )
    s = p.add_subparsers(dest="cmd", required=True)

    g = s.add_parser("generate_jwt_token", help="Print a signed JWT")
    g.add_argument("--secret", required=True, help="Secret value to generate JWT token from")
    g.set_defaults(func=commands.generate_jwt_token)

    u = s.add_parser(
        "use_internal_authentication", help="Run 'show catalogs' against a coordinator"
    )
    u.add_argument(
        "--secret",
        help="Secret value to generate JWT token from; defaults to the coordinator's environment",
    )
    u.add_argument("--coordinator", required=True, help="Coordinator URL")
    u.set_defaults(func=commands.use_internal_authentication)

    e = s.add_parser("execute_http_request", help="Issue a GET request carrying a signed JWT")
    e.add_argument(
        "--secret",
        required=True,
        help="Secret value to generate JWT token from. Use the environment name "
        "if no shared secret is configured",
    )
    e.add_argument(
        "--request", required=True, help="Request URL e.g. http://<coordinator>:8080/v1/service"
    )
    e.set_defaults(func=commands.execute_http_request)

    for sub in (g, u, e):
        sub.add_argument(
            "--principal",
            default=default_principal,
            help="Value for subject to use for JWT token",
        )
    return p


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"jwtgen: invalid configuration: {e}", file=sys.stderr)
        return 2
    out = out or sys.stdout
    args = build_parser(settings.DEFAULT_PRINCIPAL, settings.LOG_LEVEL).parse_args(argv)
    setup_logging(args.log_level)
    try:
        return args.func(args, settings, out)
    except JwtGenError as e:
        log.error(f"{args.cmd} failed: {e}")
        print(f"{args.cmd}: {e}", file=sys.stderr)
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()

import argparse
import logging
from typing import TextIO

from jwtgen.auth.token import generate_jwt
from jwtgen.client.http import (
    bearer_headers,
    build_http_client,
    fetch_environment,
    parse_url,
    send,
)
from jwtgen.client.statement import show_catalogs
from jwtgen.config import Settings
from jwtgen.errors import InvalidUrlError, JwtGenError

log = logging.getLogger(__name__)


def _sign(secret: str, principal: str, settings: Settings) -> str:
    return generate_jwt(secret, principal, ttl_minutes=settings.JWT_TTL_MINUTES)


def generate_jwt_token(args: argparse.Namespace, settings: Settings, out: TextIO) -> int:
    print(_sign(args.secret, args.principal, settings), file=out)
    return 0


def use_internal_authentication(
    args: argparse.Namespace, settings: Settings, out: TextIO
) -> int:
    """
    Sign a token with the shared secret, or with the coordinator's
    environment name when no secret is given, and list catalogs with it.
    """
    coordinator = args.coordinator
    try:
        with build_http_client(settings) as client:
            secret = args.secret
            if secret is None:
                secret = fetch_environment(client, coordinator)
                print(f"{coordinator} has environment {secret}", file=out)
            token = _sign(secret, args.principal, settings)
            print("generated JWT", file=out)
            print(token, file=out)
            show_catalogs(client, coordinator, token, settings, out)
    except InvalidUrlError as e:
        print(f"invalid coordinator url: {coordinator}", file=out)
        print(repr(e), file=out)
        return 1
    except JwtGenError as e:
        log.error(f"use_internal_authentication failed: {e}")
        print(e, file=out)
        return 1
    return 0


def execute_http_request(args: argparse.Namespace, settings: Settings, out: TextIO) -> int:
    token = _sign(args.secret, args.principal, settings)
    print("generated JWT", file=out)
    print(token, file=out)

    try:
        url = parse_url(args.request)
    except InvalidUrlError as e:
        raise InvalidUrlError(f"invalid request: {args.request}") from e

    with build_http_client(settings) as client:
        request = client.build_request("GET", url, headers=bearer_headers(token, settings))
        response = send(client, request)

    status = f"{response.http_version} {response.status_code} {response.reason_phrase}"
    print(f"Got: {status}, headers {dict(response.headers)}, body {response.text}", file=out)
    return 0

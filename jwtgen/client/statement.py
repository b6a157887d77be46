import logging
from typing import Any, TextIO

import httpx

from jwtgen.client.http import (
    JsonResponse,
    bearer_headers,
    coordinator_endpoint,
    execute_json,
    parse_url,
)
from jwtgen.client.models import QueryResults
from jwtgen.config import Settings
from jwtgen.errors import InvalidUrlError, QueryFailedError

log = logging.getLogger(__name__)

SHOW_CATALOGS = "show catalogs"


def _check_page(response: JsonResponse[QueryResults], query: str) -> QueryResults:
    if response.status_code != httpx.codes.OK or not response.has_value:
        raise QueryFailedError(f"{query} failed")
    results = response.value
    if results.error is not None:
        raise QueryFailedError(f"{query} failed: {results.error.message}")
    return results


def run_statement(
    client: httpx.Client,
    coordinator_url: str,
    query: str,
    token: str,
    settings: Settings,
    out: TextIO,
) -> list[list[Any]]:
    """
    Submit `query` to /v1/statement and follow nextUri until the result set
    is exhausted.

    Prints the columns of the first page and the data of every following
    page to `out`. Returns the accumulated data rows.
    """
    headers = bearer_headers(token, settings)
    request = client.build_request(
        "POST",
        coordinator_endpoint(coordinator_url, "/v1/statement"),
        headers={**headers, "Content-Type": "text/plain; charset=utf-8"},
        content=query.encode("utf-8"),
    )
    results = _check_page(execute_json(client, request, QueryResults), query)
    print(results.columns, file=out)

    rows: list[list[Any]] = list(results.data or [])
    pages = 1
    while results.next_uri:
        try:
            next_url = parse_url(results.next_uri)
        except InvalidUrlError as e:
            raise QueryFailedError(f"{query} failed: invalid nextUri {results.next_uri}") from e
        request = client.build_request("GET", next_url, headers=headers)
        results = _check_page(execute_json(client, request, QueryResults), query)
        print(results.data, file=out)
        rows.extend(results.data or [])
        pages += 1

    log.info(f"Query {results.id} finished after {pages} pages, {len(rows)} rows")
    return rows


def show_catalogs(
    client: httpx.Client,
    coordinator_url: str,
    token: str,
    settings: Settings,
    out: TextIO,
) -> list[list[Any]]:
    return run_statement(client, coordinator_url, SHOW_CATALOGS, token, settings, out)

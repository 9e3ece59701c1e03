"""End-to-end flows mixing sync and async steps.

These mirror how the library is meant to be used at a service boundary:
``safe`` around raising code, a pipeline of operators, and exhaustive
matching at the end.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal
from unittest.mock import AsyncMock, Mock

import pytest

from pipeable_result import Result, TaggedError, fail, pipe, safe, succeed
from pipeable_result.operators import (
    catch_err,
    chain,
    chain_err,
    map,
    map_err,
    match,
    match_errors,
    tap,
)

pytestmark = pytest.mark.integration


@dataclass(frozen=True)
class User:
    name: str
    document_ids: list[str]


@dataclass(frozen=True)
class Document:
    name: str
    status: Literal["VALIDATED", "NOT_VALIDATED"]


@dataclass(frozen=True, kw_only=True)
class HttpResponseError(TaggedError):
    tag: str = "HttpResponseError"
    status: int


@dataclass(frozen=True, kw_only=True)
class NetworkError(TaggedError):
    tag: str = "NetworkError"


DOCUMENTS = [
    Document("Document 1", "VALIDATED"),
    Document("Document 2", "NOT_VALIDATED"),
    Document("Document 3", "VALIDATED"),
]


async def get_user(_user_id: str) -> Result[User, NetworkError | HttpResponseError]:
    return succeed(User("UserName", ["1", "2", "3"]))


def is_validated(document: Document) -> bool:
    return document.status == "VALIDATED"


@pytest.mark.asyncio
async def test_successful_document_flow() -> None:
    get_documents = AsyncMock(return_value=succeed(DOCUMENTS))
    log_valid = Mock()
    log_error = Mock()

    result = await (await get_user("user123")).pipe(
        chain(lambda user: get_documents(user.document_ids)),
        map(lambda documents: [d for d in documents if is_validated(d)]),
        tap(log_valid),
        catch_err(log_error),
    )

    assert result == succeed([DOCUMENTS[0], DOCUMENTS[2]])
    get_documents.assert_awaited_once_with(["1", "2", "3"])
    log_valid.assert_called_once_with([DOCUMENTS[0], DOCUMENTS[2]])
    log_error.assert_not_called()


@pytest.mark.asyncio
async def test_failing_document_flow_short_circuits() -> None:
    get_documents = AsyncMock(return_value=fail(HttpResponseError(status=500)))
    check = Mock(side_effect=is_validated)
    log_valid = Mock()
    log_error = Mock()

    result = await pipe(
        get_user("user123"),
        chain(lambda user: get_documents(user.document_ids)),
        map(lambda documents: [d for d in documents if check(d)]),
        tap(log_valid),
        catch_err(log_error),
    )

    assert result == fail(HttpResponseError(status=500))
    check.assert_not_called()
    log_valid.assert_not_called()
    log_error.assert_called_once_with(HttpResponseError(status=500))


@pytest.mark.asyncio
async def test_safe_boundary_then_exhaustive_match() -> None:
    async def fetch(url: str) -> dict[str, Any]:
        raise ConnectionError(f"cannot reach {url}")

    message = await pipe(
        safe(lambda: fetch("https://example.test"), lambda exc: NetworkError(message=str(exc))),
        map(lambda payload: payload["name"]),
        match(
            Success=lambda name: f"hello {name}",
            NetworkError=lambda err: f"offline: {err.message}",
            HttpResponseError=lambda err: f"http {err.status}",
        ),
    )

    assert message == "offline: cannot reach https://example.test"


@pytest.mark.asyncio
async def test_recovery_with_match_errors_then_continue() -> None:
    async def cached_documents(_err: HttpResponseError) -> Result[list[Document], Any]:
        return succeed(DOCUMENTS[:1])

    result = await fail(HttpResponseError(status=503)).pipe(
        match_errors(
            HttpResponseError=cached_documents,
            NetworkError=lambda _err: succeed([]),
        ),
        map(len),
    )

    assert result == succeed(1)


@pytest.mark.asyncio
async def test_error_translation_across_layers() -> None:
    result = await fail(NetworkError(message="reset")).pipe(
        map_err(lambda err: HttpResponseError(status=502, message=err.message)),
        chain_err(
            lambda err: _async_value(fail("GatewayError", f"upstream {err.status}"))
        ),
    )

    assert result.is_failure()
    assert result.inspect() == "Failure(GatewayError: message: 'upstream 502')"
    assert result.unwrap(err=lambda _e: "fallback") == "fallback"


async def _async_value(value: Any) -> Any:
    return value

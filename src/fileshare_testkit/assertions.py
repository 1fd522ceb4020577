"""Checks applied to SDK calls and the errors they raise."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

import pytest
from azure.core.exceptions import HttpResponseError
from azure.core.pipeline import PipelineResponse
from azure.storage.fileshare import StorageErrorCode

T = TypeVar("T")

HTTP_CREATED = 201


def expect_status(operation: Callable[..., T], status: int, *args: Any, **kwargs: Any) -> T:
    """Call an SDK operation and assert the service answered with ``status``.

    The status is read from the final pipeline response through the SDK's
    ``raw_response_hook``; a hook supplied by the caller still runs.
    Exceptions raised by the SDK propagate.
    """
    seen: list[int] = []
    caller_hook = kwargs.pop("raw_response_hook", None)

    def _capture(response: PipelineResponse) -> None:
        seen.append(response.http_response.status_code)
        if caller_hook is not None:
            caller_hook(response)

    result = operation(*args, raw_response_hook=_capture, **kwargs)

    assert seen, f"{_describe(operation)} returned without an HTTP response"
    assert seen[-1] == status, (
        f"{_describe(operation)} returned HTTP {seen[-1]}, expected {status}"
    )
    return result


def expect_created(operation: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    return expect_status(operation, HTTP_CREATED, *args, **kwargs)


def validate_storage_error(
    err: BaseException | None, code: StorageErrorCode | str
) -> HttpResponseError:
    """Assert ``err`` is a storage error carrying the given service code."""
    assert err is not None, f"expected storage error {code}, got no error"
    assert isinstance(err, HttpResponseError), (
        f"expected storage error {code}, got {type(err).__name__}: {err}"
    )
    assert err.error_code == code, (
        f"expected service code {_code_value(code)}, got {err.error_code}"
    )
    return err


@contextmanager
def expect_storage_error(code: StorageErrorCode | str) -> Iterator[pytest.ExceptionInfo]:
    """Assert the block raises a storage error with the given service code.

    Usage:
        with expect_storage_error(StorageErrorCode.share_already_exists):
            share.create_share()
    """
    with pytest.raises(HttpResponseError) as excinfo:
        yield excinfo
    validate_storage_error(excinfo.value, code)


def _code_value(code: StorageErrorCode | str) -> str:
    return code.value if isinstance(code, StorageErrorCode) else code


def _describe(operation: Callable[..., Any]) -> str:
    return getattr(operation, "__qualname__", None) or repr(operation)

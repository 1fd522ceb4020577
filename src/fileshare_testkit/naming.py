"""Unique names for ephemeral shares, directories and files.

A generated name is the caller-supplied prefix, the lower-cased name of the
test asking for it, and the minute, second and nanosecond of the call,
followed by a per-process sequence number. This makes it easy to associate
a resource with its test, to identify it uniquely, and to see the order in
which resources were created.

Share names are limited to 63 characters, so long test names get truncated.
"""

from __future__ import annotations

import inspect
import itertools
import os
import re
import time
from datetime import datetime

SHARE_PREFIX = "py"
DIRECTORY_PREFIX = "pytestdirectory"
FILE_PREFIX = "pytestfile"

SHARE_NAME_MAX_LENGTH = 63
PATH_NAME_MAX_LENGTH = 255

# Used when no test can be found on the stack
DEFAULT_TEST_NAME = "TestFoo"

_NANOS_PER_SECOND = 1_000_000_000
_INVALID_CHARS_RE = re.compile(r"[^a-z0-9]")
_sequence = itertools.count(1)


def caller_test_name() -> str:
    """Name of the test currently asking for a resource name.

    Walks up the stack for a ``test*`` function first, so helpers called
    from a test body are attributed to it. Fixtures have no test frame above
    them, so pytest's ``PYTEST_CURRENT_TEST`` is used next.
    """
    here = inspect.currentframe()
    frame = here.f_back if here is not None else None
    while frame is not None:
        if frame.f_code.co_name.startswith("test"):
            return frame.f_code.co_name
        frame = frame.f_back

    current = os.environ.get("PYTEST_CURRENT_TEST")
    if current:
        # e.g. "tests/test_share.py::TestShare::test_create[smb] (setup)"
        node_id = current.rsplit(" ", 1)[0]
        return node_id.rsplit("::", 1)[-1]

    return DEFAULT_TEST_NAME


def sanitize_test_name(test_name: str) -> str:
    """Reduce a test name to characters valid in every resource name."""
    name = test_name.lower()
    if name.startswith("test"):
        name = name[len("test"):]
    return _INVALID_CHARS_RE.sub("", name)


def generate_name(
    prefix: str,
    *,
    test_name: str | None = None,
    max_length: int | None = None,
) -> str:
    """Generate a resource name unique within this process."""
    if test_name is None:
        test_name = caller_test_name()
    caller = sanitize_test_name(test_name)

    now_ns = time.time_ns()
    now = datetime.fromtimestamp(now_ns // _NANOS_PER_SECOND)
    suffix = (
        f"{now.minute:02d}{now.second:02d}"
        f"{now_ns % _NANOS_PER_SECOND:09d}{next(_sequence)}"
    )

    if max_length is not None:
        room = max_length - len(prefix) - len(suffix)
        if room < 0:
            raise ValueError(
                f"prefix {prefix!r} leaves no room for a unique suffix "
                f"within {max_length} characters"
            )
        caller = caller[:room]

    return f"{prefix}{caller}{suffix}"


def generate_share_name() -> str:
    return generate_name(SHARE_PREFIX, max_length=SHARE_NAME_MAX_LENGTH)


def generate_directory_name() -> str:
    return generate_name(DIRECTORY_PREFIX, max_length=PATH_NAME_MAX_LENGTH)


def generate_file_name() -> str:
    return generate_name(FILE_PREFIX, max_length=PATH_NAME_MAX_LENGTH)

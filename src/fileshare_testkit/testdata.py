"""Fixed payloads shared by file tests."""

from __future__ import annotations

from azure.storage.fileshare import ContentSettings

FILE_DEFAULT_DATA = b"file default data"

BASIC_HEADERS = ContentSettings(
    content_type="my_type",
    content_disposition="my_disposition",
    cache_control="control",
    content_md5=None,
    content_language="my_language",
    content_encoding="my_encoding",
)

BASIC_METADATA = {"foo": "bar"}

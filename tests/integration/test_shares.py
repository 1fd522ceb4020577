"""E2E-01: Share creation helpers against a live account.

Purpose: Verify shares are created under the generated name and that a
second create on the same name is rejected with ShareAlreadyExists.
"""

from __future__ import annotations

import pytest
from azure.core.exceptions import HttpResponseError
from azure.storage.fileshare import StorageErrorCode

from fileshare_testkit.assertions import expect_storage_error, validate_storage_error
from fileshare_testkit.naming import SHARE_PREFIX, generate_name
from fileshare_testkit.resources import (
    create_new_share,
    create_new_share_with_prefix,
    delete_share,
    sweep_shares,
)

from .conftest import e2e_skipif_marks

pytestmark = e2e_skipif_marks


class TestE2E01Shares:
    """E2E-01: Share creation and conflicts."""

    def test_create_new_share(self, fsu):
        """Created share exists under the generated name."""
        share, name = create_new_share(fsu)
        try:
            assert name.startswith(SHARE_PREFIX)
            props = share.get_share_properties()
            assert props.name == name
        finally:
            delete_share(share)

    def test_create_new_share_with_prefix(self, fsu):
        """Prefix replaces the default share prefix."""
        share, name = create_new_share_with_prefix(fsu, "pyprefixed")
        try:
            assert name.startswith("pyprefixed")
            assert share.get_share_properties().name == name
        finally:
            delete_share(share)

    def test_create_existing_share_conflicts(self, share):
        """Creating a share twice yields ShareAlreadyExists."""
        with expect_storage_error(StorageErrorCode.share_already_exists):
            share.create_share()

    def test_conflict_error_carries_service_code(self, share):
        """The conflict error is inspectable outside a with-block too."""
        with pytest.raises(HttpResponseError) as excinfo:
            share.create_share()

        err = validate_storage_error(excinfo.value, StorageErrorCode.share_already_exists)
        assert err.status_code == 409

    def test_delete_share_twice(self, fsu):
        """Deleting an already-deleted share is reported, not raised."""
        share, _ = create_new_share(fsu)
        assert delete_share(share) is True
        assert delete_share(share) is False

    def test_sweep_shares(self, fsu):
        """Sweep removes every share with the prefix."""
        prefix = generate_name("pysweep", max_length=40)
        created = [create_new_share_with_prefix(fsu, prefix)[1] for _ in range(2)]

        deleted = sweep_shares(fsu, prefix)

        assert sorted(deleted) == sorted(created)


class TestE2E01AlternateAccount:
    """E2E-01: Helpers work against the secondary account."""

    def test_create_share_in_secondary_account(self, alternate_fsu):
        share, name = create_new_share(alternate_fsu)
        try:
            assert share.account_name == alternate_fsu.account_name
            assert share.get_share_properties().name == name
        finally:
            delete_share(share)

"""Live Azure Files tests.

Require ACCOUNT_NAME/ACCOUNT_KEY (and, for cross-account tests,
SECONDARY_ACCOUNT_NAME/SECONDARY_ACCOUNT_KEY) plus network access to the
account's file endpoint; skipped otherwise.

Parallel-safe: Yes - every test creates and deletes its own shares.
"""

"""Strongly typed identifiers for identity entities.

Internal identifiers are opaque strings issued by the account store
(cuid-style), so they are not parsed as UUIDs.
"""

from typing import NewType

UserId = NewType("UserId", str)
LinkedAccountId = NewType("LinkedAccountId", str)

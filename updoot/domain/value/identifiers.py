"""Strongly typed identifiers for Updoot domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting. Identifiers are database-assigned
serial integers.
"""

from typing import NewType

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)

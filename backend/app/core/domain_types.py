"""Domain Types: identity and field constants for the Tutorial entity.

Invariants:
    - TutorialId wraps a UUID: never a raw request string past the repository boundary
    - MUTABLE_FIELDS is the closed set of client-writable fields
"""

from typing import NewType
from uuid import UUID


TutorialId = NewType("TutorialId", UUID)

# id, created_at and updated_at are owned by the storage layer
MUTABLE_FIELDS = ("title", "description", "published")

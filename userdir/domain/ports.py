from __future__ import annotations
from typing import Any, Dict, List, Optional, Protocol


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, *, meta: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta


# ---- Ports (Hexagonal boundaries) ----
class UserSourcePort(Protocol):
    """Read access to the remote user collection.

    Returns raw JSON-shaped mappings; enrichment and typing happen in the
    ``FetchUsers`` use case.
    """

    def fetch_all(self) -> List[Dict[str, Any]]: ...

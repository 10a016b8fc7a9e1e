"""
Request Outcome
Tagged result of the most recent token or search request.
"""
from typing import List, NamedTuple, Optional, Union


class Ok(NamedTuple):
    """Successful request. ``results`` is None for the token exchange."""
    status_code: int
    results: Optional[List[dict]] = None

    @property
    def ok(self) -> bool:
        return True

    @property
    def body(self):
        return self.results


class Err(NamedTuple):
    """Failed request.

    ``kind`` is one of ``"auth"``, ``"transport"`` or ``"upstream"``.
    """
    kind: str
    message: str
    status_code: int = 0

    @property
    def ok(self) -> bool:
        return False

    @property
    def body(self):
        return self.message


Outcome = Union[Ok, Err]

"""
Common plumbing for the entity services.
"""

import logging
from typing import Callable, List, Sequence, TypeVar

from ..core.clock import new_id, utc_now_iso
from ..core.errors import NotFound
from ..repositories.registry import Repositories

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseService:
    """Base class holding the collaborators every service needs.

    Parameters
    ----------
    repositories : Repositories
        The application's entity collections.
    id_factory : Callable[[], str]
        Produces a fresh record identifier.
    clock : Callable[[], str]
        Produces the creation timestamp as an ISO‑8601 string.
    empty_result_is_error : bool
        When true (the default), list operations raise ``NotFound``
        for an empty result instead of returning ``[]``.
    """

    def __init__(
        self,
        repositories: Repositories,
        *,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], str] = utc_now_iso,
        empty_result_is_error: bool = True,
    ) -> None:
        self.repositories = repositories
        self.id_factory = id_factory
        self.clock = clock
        self.empty_result_is_error = empty_result_is_error

    def _stamp(self) -> dict:
        """Identifier and creation time for a record about to be inserted."""
        return {"id": self.id_factory(), "created_at": self.clock()}

    def _listing(self, records: Sequence[T], empty_message: str) -> List[T]:
        if not records and self.empty_result_is_error:
            raise NotFound(empty_message)
        return list(records)

"""Abstract interface for the external reindex action."""

from abc import ABC, abstractmethod


class ReindexAction(ABC):
    """Abstract base class for whatever rebuilds the search index."""

    @abstractmethod
    def reindex(self) -> None:
        """
        Runs a full reindex of the data store.

        Raises:
            ReindexError: If the reindex does not complete successfully.
        """

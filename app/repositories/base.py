from abc import ABC, abstractmethod
from typing import Generic, TypeVar, List

T = TypeVar("T")

class CollectionRepository(ABC, Generic[T]):
    """Whole-collection storage: read everything, overwrite everything.

    Implementations raise ``StorageError`` for any read or write failure.
    A failed ``save_all`` must leave the previously stored collection intact.
    """

    @abstractmethod
    def get_all(self) -> List[T]:
        """Return the stored collection in storage order."""

    @abstractmethod
    def save_all(self, items: List[T]) -> None:
        """Replace the stored collection with ``items``."""

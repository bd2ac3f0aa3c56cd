"""Abstract contract for loading the item collection."""

from abc import ABC, abstractmethod

from catalog.models.item import CatalogItem


class CatalogRepository(ABC):
    """Contract for supplying the immutable catalog at startup.

    Implementations could be S3, local disk, an HTTP export, etc.
    Handlers depend on this interface, not the implementation.
    """

    @abstractmethod
    def load_items(self) -> tuple[CatalogItem, ...]:
        """Load every catalog item in display order.

        Returns:
            The full, ordered item collection

        Raises:
            NotFoundError: If the catalog document doesn't exist
            CatalogLoadError: If the document cannot be read or parsed
        """

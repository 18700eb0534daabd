from theater.stores.interfaces import PlayCatalog
from theater.stores.memory_store import InMemoryPlayCatalog

__all__ = ["PlayCatalog", "InMemoryPlayCatalog"]

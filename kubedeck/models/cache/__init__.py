"""Thread-safe caches shared across refresh cycles."""

from kubedeck.models.cache.multi_container_cache import MultiContainerCache
from kubedeck.models.cache.state_cache import StateCache

__all__ = ["MultiContainerCache", "StateCache"]

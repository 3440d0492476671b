"""Domain entities for internal representation.

These are frozen dataclasses used internally by services. They are NOT
used for API contracts - use DTOs from the dto package for that.
"""

from .cached_buffer import CachedBufferEntity

__all__ = ["CachedBufferEntity"]

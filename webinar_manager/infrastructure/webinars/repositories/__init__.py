from .in_memory_webinar_repository import InMemoryWebinarRepository
from .webinar_repository import WebinarRepository

__all__ = [
    "InMemoryWebinarRepository",
    "WebinarRepository",
]

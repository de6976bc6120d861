from .webinar_repository import WebinarRepositoryProtocol

__all__ = ["WebinarRepositoryProtocol"]

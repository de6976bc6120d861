"""Protocol for Webinar repository."""

from typing import Protocol

from webinar_manager.domain.common.value_objects import WebinarId
from webinar_manager.domain.webinars.entities.webinar import Webinar


class WebinarRepositoryProtocol(Protocol):
    """Interface for Webinar persistence."""

    def find_by_id(self, webinar_id: WebinarId) -> Webinar | None: ...

    def create(self, webinar: Webinar) -> None: ...

    def update(self, webinar: Webinar) -> None: ...

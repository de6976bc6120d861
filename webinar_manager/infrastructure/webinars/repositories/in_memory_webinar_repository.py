"""In-process Webinar repository, used to isolate tests from the database."""

from collections.abc import Iterable
from dataclasses import replace

from webinar_manager.domain.common.exceptions import NotFoundError
from webinar_manager.domain.common.value_objects.ids import WebinarId
from webinar_manager.domain.webinars.entities.webinar import Webinar


class InMemoryWebinarRepository:
    """
    Webinar repository backed by a dict keyed by webinar ID.

    Entities are copied on the way in and out, so changes made to a loaded
    webinar are only visible to later reads once ``update`` is called.
    """

    def __init__(self, webinars: Iterable[Webinar] = ()) -> None:
        self._webinars: dict[WebinarId, Webinar] = {
            webinar.id: replace(webinar) for webinar in webinars
        }

    def find_by_id(self, webinar_id: WebinarId) -> Webinar | None:
        webinar = self._webinars.get(webinar_id)
        return replace(webinar) if webinar is not None else None

    def create(self, webinar: Webinar) -> None:
        if webinar.id in self._webinars:
            raise ValueError(f"Webinar with id {webinar.id} already exists")
        self._webinars[webinar.id] = replace(webinar)

    def update(self, webinar: Webinar) -> None:
        if webinar.id not in self._webinars:
            raise NotFoundError("Webinar not found")
        self._webinars[webinar.id] = replace(webinar)

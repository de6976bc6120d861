from .webinar import MAX_SEATS, MIN_SEATS, Webinar, WebinarProps

__all__ = [
    "MAX_SEATS",
    "MIN_SEATS",
    "Webinar",
    "WebinarProps",
]

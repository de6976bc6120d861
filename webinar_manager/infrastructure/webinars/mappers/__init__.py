from .webinar_mapper import WebinarMapper

__all__ = ["WebinarMapper"]

from .strings import parse_duration, slugify

__all__ = ["parse_duration", "slugify"]

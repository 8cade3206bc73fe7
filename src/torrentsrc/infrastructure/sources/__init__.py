from .normalizer import normalize_item, normalize_items
from .piratebay import PirateBaySource

__all__ = ["PirateBaySource", "normalize_item", "normalize_items"]

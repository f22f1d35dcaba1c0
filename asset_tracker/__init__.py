# asset_tracker/__init__.py
from .models import Item, Kind, Office
from .registry import AssetRegistry, AssetRow

__all__ = ["AssetRegistry", "AssetRow", "Item", "Kind", "Office"]

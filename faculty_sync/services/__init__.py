from .sync_errors import InvalidDirectionError
from .sync_service import SyncDirection, parse_direction, synchronize_data

__all__ = [
    "InvalidDirectionError",
    "SyncDirection",
    "parse_direction",
    "synchronize_data",
]

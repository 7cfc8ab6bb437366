from .history_store import HistoryStore
from .place_store import PlaceStore

__all__ = [
    'HistoryStore',
    'PlaceStore',
]

from database.repositories.base import BaseRepository
from database.repositories.capital import CapitalRepository

__all__ = [
    'BaseRepository',
    'CapitalRepository',
]

"""
Capital Source Interface - Abstract base for seeker/provider lookups.

The matching engine never talks to storage directly; callers hand it a
CapitalSource (the SQLAlchemy repository in production, an in-memory fake
in tests).
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from core.matching.models import Seeker, Provider


class CapitalSource(ABC):
    """
    Abstract Interface for seeker and provider persistence.
    """

    @abstractmethod
    def get_seeker_by_id(self, seeker_id: str) -> Optional[Seeker]:
        """
        Resolve a seeker by id, or None when it does not exist.
        """
        pass

    @abstractmethod
    def list_providers(self) -> List[Provider]:
        """
        Return the full candidate pool: firms and individual investors.

        Order is preserved by the ranker before its final sort.
        """
        pass

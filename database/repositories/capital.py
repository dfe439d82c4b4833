import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from core.matching.interfaces import CapitalSource
from core.matching.models import IndividualInvestor, InvestmentFirm, Provider, Seeker
from database.models import InvestmentFirmModel, InvestorModel, SeekerModel
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class CapitalRepository(BaseRepository, CapitalSource):
    """SQLAlchemy-backed CapitalSource.

    Rows are mapped to the engine's frozen records on read, so the matching
    engine never holds live ORM objects.
    """

    def get_seeker_by_id(self, seeker_id: str) -> Optional[Seeker]:
        row = self.db.execute(
            select(SeekerModel).where(SeekerModel.id == str(seeker_id))
        ).scalar_one_or_none()
        return _to_seeker(row) if row is not None else None

    def list_providers(self) -> List[Provider]:
        """All firms followed by all individual investors, each ordered by creation time."""
        firms = self.db.execute(
            select(InvestmentFirmModel).order_by(InvestmentFirmModel.created_at, InvestmentFirmModel.id)
        ).scalars().all()
        investors = self.db.execute(
            select(InvestorModel).order_by(InvestorModel.created_at, InvestorModel.id)
        ).scalars().all()

        providers: List[Provider] = [_to_firm(row) for row in firms]
        providers.extend(_to_investor(row) for row in investors)
        logger.debug(f"Loaded {len(firms)} firms and {len(investors)} investors")
        return providers

    # --- Write helpers (seeding, imports, tests) ---

    def add_seeker(self, data: Dict[str, Any]) -> SeekerModel:
        row = SeekerModel(**data)
        self.db.add(row)
        self.flush()  # Generate ID
        return row

    def add_firm(self, data: Dict[str, Any]) -> InvestmentFirmModel:
        row = InvestmentFirmModel(**data)
        self.db.add(row)
        self.flush()
        return row

    def add_investor(self, data: Dict[str, Any]) -> InvestorModel:
        row = InvestorModel(**data)
        self.db.add(row)
        self.flush()
        return row


def _to_seeker(row: SeekerModel) -> Seeker:
    return Seeker(
        id=row.id,
        name=row.name or "",
        industries=list(row.industries or []),
        description=row.description,
        stage=row.stage,
        target_amount=row.target_amount,
        location=row.location,
        website=row.website,
    )


def _to_firm(row: InvestmentFirmModel) -> InvestmentFirm:
    return InvestmentFirm(
        id=row.id,
        name=row.name or "",
        description=row.description,
        industry=row.industry,
        sectors=list(row.sectors or []),
        firm_type=row.firm_type,
        stages=list(row.stages or []),
        check_size_min=row.check_size_min,
        check_size_max=row.check_size_max,
        typical_check_size=row.typical_check_size,
        aum=row.aum,
        hq_location=row.hq_location,
        location=row.location,
        portfolio_count=row.portfolio_count,
        website=row.website,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_investor(row: InvestorModel) -> IndividualInvestor:
    return IndividualInvestor(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        firm_id=row.firm_id,
        bio=row.bio,
        investor_type=row.investor_type,
        title=row.title,
        funding_stage=row.funding_stage,
        typical_investment=row.typical_investment,
        location=row.location,
        email=row.email,
        linkedin_url=row.linkedin_url,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )

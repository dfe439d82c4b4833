import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Text, Float, Integer, DateTime, JSON, ForeignKey, Index
from sqlalchemy.orm import relationship

from .base import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _empty_list() -> list:
    return []


class SeekerModel(Base):
    """A fundraising company. Read by the matching engine, never written by it."""
    __tablename__ = 'seekers'

    id = Column(Text, primary_key=True, default=_new_id)
    name = Column(Text, nullable=False)
    industries = Column(JSON, nullable=False, default=_empty_list)
    description = Column(Text)
    stage = Column(Text)
    target_amount = Column(Float)
    location = Column(Text)
    website = Column(Text)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)


class InvestmentFirmModel(Base):
    __tablename__ = 'investment_firms'

    id = Column(Text, primary_key=True, default=_new_id)
    name = Column(Text, nullable=False)
    description = Column(Text)
    industry = Column(Text)
    sectors = Column(JSON, nullable=False, default=_empty_list)
    firm_type = Column(Text)  # Venture Capital|Family Office|Private Equity|...
    stages = Column(JSON, nullable=False, default=_empty_list)

    # Numeric bounds win over the free-text typical_check_size
    check_size_min = Column(Float)
    check_size_max = Column(Float)
    typical_check_size = Column(Text)
    aum = Column(Text)

    hq_location = Column(Text)
    location = Column(Text)
    portfolio_count = Column(Integer)
    website = Column(Text)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=True, default=_utcnow, onupdate=_utcnow)

    investors = relationship("InvestorModel", back_populates="firm")

    __table_args__ = (
        Index('idx_investment_firms_updated', 'updated_at'),
    )


class InvestorModel(Base):
    __tablename__ = 'investors'

    id = Column(Text, primary_key=True, default=_new_id)
    firm_id = Column(Text, ForeignKey('investment_firms.id', ondelete='SET NULL'), nullable=True)

    first_name = Column(Text)
    last_name = Column(Text)
    title = Column(Text)
    bio = Column(Text)
    investor_type = Column(Text)
    funding_stage = Column(Text)
    typical_investment = Column(Text)
    location = Column(Text)
    email = Column(Text)
    linkedin_url = Column(Text)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=True, default=_utcnow, onupdate=_utcnow)

    firm = relationship("InvestmentFirmModel", back_populates="investors")

    __table_args__ = (
        Index('idx_investors_firm', 'firm_id'),
    )

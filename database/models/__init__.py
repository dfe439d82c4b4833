from .base import Base
from .capital import SeekerModel, InvestmentFirmModel, InvestorModel

__all__ = [
    'Base',
    'SeekerModel',
    'InvestmentFirmModel',
    'InvestorModel',
]

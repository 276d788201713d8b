"""
TRAINING COMPENSATION ENGINE
Youth academy transfer compensation per the DFL/DFB schedule
"""

from .models import CompensationResult, TransferScenario
from .processor import CompensationEngine

__all__ = ['CompensationEngine', 'TransferScenario', 'CompensationResult']

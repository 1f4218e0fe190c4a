from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from cse_portfolio.domain.value_objects.allocation import AllocationPlan, StockAllocationRequest


class CapitalAllocator(ABC):
    @abstractmethod
    def allocate(
        self,
        total_capital: float,
        entries: Sequence[StockAllocationRequest],
        step: int,
    ) -> AllocationPlan:
        raise NotImplementedError

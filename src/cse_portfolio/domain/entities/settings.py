from __future__ import annotations

from pydantic import Field

from cse_portfolio.domain.base import DomainModel


class Settings(DomainModel):
    capital: float = Field(default=0.0, ge=0.0)

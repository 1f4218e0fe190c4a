from __future__ import annotations

from typing import Mapping, Sequence

import pandas as pd

from cse_portfolio.config import UNKNOWN_SECTOR
from cse_portfolio.domain.entities.holding import Holding
from cse_portfolio.domain.value_objects.allocation import AllocationPlan
from cse_portfolio.domain.value_objects.rule_violation import RuleViolation

PLAN_COLUMNS = [
    "symbol",
    "label",
    "price",
    "target_shares",
    "optimized_shares",
    "base_cost",
    "fee_cost",
    "total_cost",
    "actual_percent",
]
VIOLATION_COLUMNS = [
    "rule_id",
    "rule_name",
    "rule_type",
    "severity",
    "threshold",
    "current_value",
    "related_symbol",
    "related_sector",
    "message",
    "impact",
]
SECTOR_COLUMNS = ["sector", "value", "percent"]


def plan_to_frame(plan: AllocationPlan) -> pd.DataFrame:
    df = pd.DataFrame(
        [result.model_dump(include=set(PLAN_COLUMNS)) for result in plan.results],
        columns=PLAN_COLUMNS,
    )
    return df.reset_index(drop=True)


def violations_to_frame(violations: Mapping[int, Sequence[RuleViolation]]) -> pd.DataFrame:
    rows = [
        violation.model_dump(include=set(VIOLATION_COLUMNS), mode="json")
        for rule_violations in violations.values()
        for violation in rule_violations
    ]
    df = pd.DataFrame(rows, columns=VIOLATION_COLUMNS)
    if df.empty:
        return df
    # Critical first, then by rule id, keeping per-rule order.
    df["_rank"] = (df["severity"] != "critical").astype(int)
    df = df.sort_values(["_rank", "rule_id"], kind="stable").drop(columns="_rank")
    return df.reset_index(drop=True)


def sector_exposure_frame(holdings: Sequence[Holding]) -> pd.DataFrame:
    df = pd.DataFrame(
        {
            "sector": [holding.stock.sector or UNKNOWN_SECTOR for holding in holdings],
            "value": [holding.market_value() for holding in holdings],
        },
        columns=["sector", "value"],
    )
    if df.empty:
        return pd.DataFrame(columns=SECTOR_COLUMNS)

    grouped = df.groupby("sector", sort=False, as_index=False)["value"].sum()
    total = grouped["value"].sum()
    grouped["percent"] = grouped["value"] / total * 100 if total > 0 else 0.0
    grouped = grouped.sort_values("value", ascending=False, kind="stable")
    return grouped.reset_index(drop=True)[SECTOR_COLUMNS]

"""Financial health score - rule-based composite from 0 (critical) to 100 (excellent)"""

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from finance_advisor.domain.models import Anomaly, Goal, Summary, Transaction
from finance_advisor.domain.statistics import expenses_of

BASE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100

HIGH_TICKET_AMOUNT = 500


@dataclass(frozen=True)
class ScoreContext:
    """Everything the health rules are allowed to look at"""

    summary: Summary
    anomalies: Sequence[Anomaly]
    transactions: Sequence[Transaction]
    goals: Sequence[Goal]


@dataclass(frozen=True)
class HealthRule:
    name: str
    effect: Callable[[ScoreContext], int]


def savings_tier(ctx: ScoreContext) -> int:
    rate = ctx.summary.savings_rate
    if rate >= 20:
        return 15
    if rate >= 10:
        return 10
    if rate >= 0:
        return 5
    return 0


def anomaly_penalty(ctx: ScoreContext) -> int:
    return -min(len(ctx.anomalies) * 2, 10)


def high_ticket_penalty(ctx: ScoreContext) -> int:
    expensive = sum(1 for t in expenses_of(ctx.transactions) if t.amount > HIGH_TICKET_AMOUNT)
    return -min(expensive, 10)


def active_goals_bonus(ctx: ScoreContext) -> int:
    active = sum(1 for g in ctx.goals if g.status == "active")
    return min(active * 5, 15)


def completed_goals_bonus(ctx: ScoreContext) -> int:
    completed = sum(1 for g in ctx.goals if g.status == "completed")
    return min(completed * 10, 10)


HEALTH_RULES: Tuple[HealthRule, ...] = (
    HealthRule("savings_tier", savings_tier),
    HealthRule("anomaly_penalty", anomaly_penalty),
    HealthRule("high_ticket_penalty", high_ticket_penalty),
    HealthRule("active_goals", active_goals_bonus),
    HealthRule("completed_goals", completed_goals_bonus),
)


def score_breakdown(ctx: ScoreContext, rules: Sequence[HealthRule] = HEALTH_RULES) -> List[Tuple[str, int]]:
    """Each rule's contribution, in evaluation order"""
    return [(rule.name, rule.effect(ctx)) for rule in rules]


def calculate_health_score(ctx: ScoreContext, rules: Sequence[HealthRule] = HEALTH_RULES) -> int:
    """
    Fold the rule contributions onto the base score and clamp to [0, 100].

    Rules:
    - Savings rate tier: +15 (>=20%), +10 (>=10%), +5 (>=0%), 0 otherwise
    - Anomalies: -2 each, at most -10
    - Expenses above 500: -1 each, at most -10
    - Active goals: +5 each, at most +15
    - Completed goals: +10, at most once
    """
    score = BASE_SCORE
    for _, points in score_breakdown(ctx, rules):
        score += points
    return max(MIN_SCORE, min(MAX_SCORE, score))

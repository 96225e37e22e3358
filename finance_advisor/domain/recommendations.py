"""Prioritized, actionable recommendations built from an ordered rule table"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from finance_advisor.domain.models import (
    Anomaly,
    CategoryPattern,
    CategoryTrend,
    Goal,
    Recommendation,
    Summary,
)

PRIORITY_WEIGHTS = {"alta": 3, "média": 2, "baixa": 1}

LOW_SAVINGS_RATE = 10
EXPENSIVE_CATEGORY_AVERAGE = 200
TREND_ALERT_CHANGE = 15


@dataclass(frozen=True)
class RecommendationContext:
    summary: Summary
    patterns: Dict[str, CategoryPattern]
    anomalies: Sequence[Anomaly]
    trends: Dict[str, CategoryTrend]
    goals: Sequence[Goal]


@dataclass(frozen=True)
class RecommendationRule:
    name: str
    build: Callable[[RecommendationContext], Optional[Recommendation]]


def highest_average_category(patterns: Dict[str, CategoryPattern]) -> Optional[Tuple[str, CategoryPattern]]:
    """Category with the largest average expense; ties go to the first one seen"""
    if not patterns:
        return None
    return max(patterns.items(), key=lambda item: item[1].average)


def low_savings(ctx: RecommendationContext) -> Optional[Recommendation]:
    rate = ctx.summary.savings_rate
    if rate >= LOW_SAVINGS_RATE:
        return None
    return Recommendation(
        priority="alta",
        type="economia",
        title="Aumente sua taxa de poupança",
        description=f"Você está poupando apenas {rate}% da sua renda. Especialistas recomendam mínimo 20%.",
        action="Identifique categorias de gastos desnecessários e reduza em 10-15%",
        impact="Melhorar autonomia financeira",
    )


def anomaly_review(ctx: RecommendationContext) -> Optional[Recommendation]:
    if not ctx.anomalies:
        return None
    anomaly = ctx.anomalies[0]
    return Recommendation(
        priority="média",
        type="alerta",
        title="Gasto anormal detectado",
        description=f"Em {anomaly.date.isoformat()}: {anomaly.reason}",
        action="Verifique se foi intencional ou se pode ser reduzido",
        impact=f"Economizar até {anomaly.amount * 0.3:.2f}",
    )


def expensive_category(ctx: RecommendationContext) -> Optional[Recommendation]:
    top = highest_average_category(ctx.patterns)
    if top is None or top[1].average <= EXPENSIVE_CATEGORY_AVERAGE:
        return None
    category, pattern = top
    return Recommendation(
        priority="média",
        type="otimizacao",
        title=f"Otimize gastos em {category}",
        description=(
            f"Você gasta em média {pattern.average:.2f}/mês em {category}. "
            "Esta é sua maior despesa variável."
        ),
        action="Reduza em 10-15% ou busque alternativas mais baratas",
        impact=f"Economia potencial: {pattern.average * 0.15:.2f}/mês",
    )


def growing_category(ctx: RecommendationContext) -> Optional[Recommendation]:
    # First qualifying category only
    for category, trend in ctx.trends.items():
        if trend.direction != "crescente" or trend.change is None:
            continue
        if abs(trend.change) <= TREND_ALERT_CHANGE:
            continue
        return Recommendation(
            priority="média",
            type="alerta",
            title=f"Gastos em {category} crescendo",
            description=f"{category} aumentou {trend.change}% no último mês. Está em tendência crescente.",
            action="Monitore e estabeleça um limite máximo para este gasto",
            impact="Evitar despesas fora de controle",
        )
    return None


def missing_goals(ctx: RecommendationContext) -> Optional[Recommendation]:
    if ctx.goals:
        return None
    return Recommendation(
        priority="baixa",
        type="planejamento",
        title="Crie metas financeiras",
        description="Você não tem metas ativas. Metas ajudam a manter o foco e disciplina.",
        action="Crie pelo menos uma meta (férias, carro, fundo de emergência)",
        impact="Aumentar motivação e organização",
    )


RECOMMENDATION_RULES: Tuple[RecommendationRule, ...] = (
    RecommendationRule("low_savings", low_savings),
    RecommendationRule("anomaly_review", anomaly_review),
    RecommendationRule("expensive_category", expensive_category),
    RecommendationRule("growing_category", growing_category),
    RecommendationRule("missing_goals", missing_goals),
)


def generate_recommendations(
    ctx: RecommendationContext,
    rules: Sequence[RecommendationRule] = RECOMMENDATION_RULES,
) -> List[Recommendation]:
    """
    Evaluate every rule in order, then sort by priority (alta first).

    Rules are independent; each contributes at most one recommendation.
    The sort is stable, so equal priorities keep rule order.
    """
    recommendations = [rec for rec in (rule.build(ctx) for rule in rules) if rec is not None]
    return sorted(recommendations, key=lambda r: PRIORITY_WEIGHTS.get(r.priority, 0), reverse=True)

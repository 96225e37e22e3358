"""Short natural-language highlights of a report"""

from typing import Dict, List, Sequence

from finance_advisor.domain.models import CategoryPattern, Summary, Transaction
from finance_advisor.domain.recommendations import highest_average_category
from finance_advisor.utils.date_utils import distinct_months

MIN_MONTHS_FOR_BREADTH = 3


def generate_insights(
    summary: Summary,
    patterns: Dict[str, CategoryPattern],
    transactions: Sequence[Transaction],
) -> List[str]:
    insights: List[str] = []

    if summary.balance > 0:
        insights.append(
            f"Ótima notícia! Você acumulou {summary.balance:.2f} neste período. Continue neste ritmo!"
        )
    else:
        insights.append(
            f"Seu saldo está negativo em {abs(summary.balance):.2f}. Reduza despesas ou aumente renda."
        )

    top = highest_average_category(patterns)
    if top is not None:
        category, pattern = top
        insights.append(f"Sua maior despesa é {category} com média de {pattern.average:.2f}/mês.")

    if summary.savings_rate > 0:
        insights.append(f"Você economiza {summary.savings_rate}% da sua renda. Parabéns!")

    month_count = len(distinct_months(t.date for t in transactions))
    if month_count >= MIN_MONTHS_FOR_BREADTH:
        insights.append(f"Analisando {month_count} meses de dados para padrões mais precisos.")

    return insights

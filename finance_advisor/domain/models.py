"""Domain models - pure Python dataclasses for the analysis engine"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_TYPES = (INCOME, EXPENSE)

ORDER_BY_INPUT = "input"
ORDER_BY_DATE = "date"

FORECAST_TOTAL_KEY = "total"


@dataclass(frozen=True)
class Transaction:
    """Transaction record supplied by the caller (already normalized to one currency)"""

    id: str
    type: str  # "income" or "expense"
    amount: float
    category: str
    date: date
    description: Optional[str] = None
    currency: Optional[str] = None

    @property
    def label(self) -> str:
        return self.description or self.category


@dataclass(frozen=True)
class Goal:
    """Savings goal; only its status is read by the engine"""

    id: str
    name: str
    target_amount: float
    current_amount: float = 0.0
    deadline: Optional[date] = None
    status: str = "active"  # "active", "completed", ...


@dataclass
class Summary:
    total_income: float
    total_expenses: float
    balance: float
    savings_rate: float
    transaction_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalIncome": self.total_income,
            "totalExpenses": self.total_expenses,
            "balance": self.balance,
            "savingsRate": self.savings_rate,
            "transactionCount": self.transaction_count,
        }


@dataclass
class CategoryPattern:
    """Descriptive statistics of one expense category"""

    average: float
    max: float
    min: float
    standard_deviation: float
    frequency: int
    trend: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "average": self.average,
            "max": self.max,
            "min": self.min,
            "standardDeviation": self.standard_deviation,
            "frequency": self.frequency,
            "trend": self.trend,
        }


@dataclass
class Anomaly:
    transaction: str
    category: str
    amount: float
    date: date
    severity: str  # "alta" or "média"
    reason: str
    z_score: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "transaction": self.transaction,
            "category": self.category,
            "amount": self.amount,
            "date": self.date.isoformat(),
            "severity": self.severity,
            "reason": self.reason,
            "zScore": self.z_score,
        }


@dataclass
class CategoryTrend:
    """Month-over-month trajectory of one category"""

    trend: float
    current: float
    previous: float
    change: Optional[float]  # None when the previous month sums to zero
    direction: str  # "crescente" or "decrescente"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "trend": self.trend,
            "current": self.current,
            "previous": self.previous,
            "change": self.change,
            "direction": self.direction,
        }


@dataclass
class Recommendation:
    priority: str  # "alta", "média" or "baixa"
    type: str
    title: str
    description: str
    action: str
    impact: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "priority": self.priority,
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "action": self.action,
            "impact": self.impact,
        }


@dataclass
class AnalysisReport:
    """Output of one engine invocation"""

    summary: Summary
    patterns: Dict[str, CategoryPattern]
    anomalies: List[Anomaly]
    category_analysis: Dict[str, CategoryTrend]
    forecast_monthly: Dict[str, float]
    health_score: int
    recommendations: List[Recommendation]
    insights: List[str]

    def to_dict(self) -> Dict[str, Any]:
        """Render the report with the field names consumed by dashboards and alerting"""
        return {
            "summary": self.summary.to_dict(),
            "patterns": {cat: p.to_dict() for cat, p in self.patterns.items()},
            "anomalies": [a.to_dict() for a in self.anomalies],
            "categoryAnalysis": {cat: t.to_dict() for cat, t in self.category_analysis.items()},
            "forecastMonthly": dict(self.forecast_monthly),
            "healthScore": self.health_score,
            "recommendations": [r.to_dict() for r in self.recommendations],
            "insights": list(self.insights),
        }


@dataclass
class Alert:
    """User-facing alert derived from report changes"""

    type: str
    title: str
    message: str
    severity: str  # "low", "medium" or "high"
    category: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "title": self.title,
            "message": self.message,
            "severity": self.severity,
            "category": self.category,
            "data": dict(self.data),
        }

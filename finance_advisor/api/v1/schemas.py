"""Pydantic schemas for API request/response validation"""

import datetime
from decimal import Decimal
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts both snake_case and camelCase field names"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TransactionIn(CamelModel):
    """Transaction as sent by the transaction store"""

    id: str = Field(..., min_length=1)
    # type, amount and date are checked per item by the domain, which reports the offending index
    type: str
    amount: Union[Decimal, str]
    category: str = ""
    description: Optional[str] = None
    date: Union[datetime.date, str]
    currency: Optional[str] = None


class GoalIn(CamelModel):
    id: str = Field(..., min_length=1)
    name: str = ""
    target_amount: Decimal = Decimal(0)
    current_amount: Decimal = Decimal(0)
    deadline: Optional[datetime.date] = None
    status: str = "active"


class AnalysisRequest(CamelModel):
    """Request body for POST /v1/analysis"""

    transactions: List[TransactionIn] = Field(default_factory=list)
    goals: List[GoalIn] = Field(default_factory=list)
    order_by: Optional[Literal["input", "date"]] = Field(
        default=None, description="Ordering seen by pattern trends and the recent-anomaly window"
    )


class SummarySchema(BaseModel):
    totalIncome: float
    totalExpenses: float
    balance: float
    savingsRate: float
    transactionCount: int


class PatternSchema(BaseModel):
    average: float
    max: float
    min: float
    standardDeviation: float
    frequency: int
    trend: float


class AnomalySchema(BaseModel):
    transaction: str
    category: str
    amount: float
    date: datetime.date
    severity: str
    reason: str
    zScore: float


class CategoryTrendSchema(BaseModel):
    trend: float
    current: float
    previous: float
    change: Optional[float] = None
    direction: str


class RecommendationSchema(BaseModel):
    priority: str
    type: str
    title: str
    description: str
    action: str
    impact: str


class AnalysisResponse(BaseModel):
    """Response for POST /v1/analysis (same shape as AnalysisReport.to_dict)"""

    summary: SummarySchema
    patterns: Dict[str, PatternSchema]
    anomalies: List[AnomalySchema]
    categoryAnalysis: Dict[str, CategoryTrendSchema]
    forecastMonthly: Dict[str, float]
    healthScore: int = Field(..., ge=0, le=100)
    recommendations: List[RecommendationSchema]
    insights: List[str]


class AlertsRequest(BaseModel):
    """Request body for POST /v1/alerts"""

    previous: Optional[AnalysisRequest] = None
    current: AnalysisRequest


class AlertSchema(BaseModel):
    type: str
    title: str
    message: str
    severity: str
    category: Optional[str] = None
    data: Dict[str, Any] = Field(default_factory=dict)


class AlertsResponse(BaseModel):
    healthScore: int
    alerts: List[AlertSchema]

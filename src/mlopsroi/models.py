from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class InputRecord(BaseModel):
    """One complete snapshot of the calculator inputs.

    Field defaults are the startup snapshot. Values are never validated
    against their UI domain: negative headcounts or a GPU utilization of 140%
    are accepted and simply flow through the formulas.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        alias_generator=to_camel,
        populate_by_name=True,
        ser_json_inf_nan="constants",
    )

    # Team structure
    data_scientists: float = 5
    ml_engineers: float = 3
    devops_engineers: float = 2
    project_managers: float = 1
    avg_ds_annual_salary: float = 150000
    avg_ml_annual_salary: float = 160000
    avg_devops_annual_salary: float = 140000
    avg_pm_annual_salary: float = 130000

    # Development workflow
    experiments_per_month: float = 50
    experiment_tracking_hours: float = 15
    model_iterations: float = 10
    data_preparation_hours: float = 20

    # Deployment process
    deployments_per_month: float = 2
    current_deployment_time: float = Field(2.5, description="months per deployment")
    deployment_failure_rate: float = Field(25, description="percent")
    rollback_time: float = Field(8, description="hours")

    # Infrastructure
    monthly_compute_costs: float = 15000
    monthly_storage_costs: float = 5000
    monthly_serving_costs: float = 10000
    gpu_utilization: float = Field(40, description="percent")

    # Monitoring & maintenance
    monitoring_hours_per_week: float = 20
    incidents_per_month: float = 5
    mttr: float = Field(4, description="hours")
    drift_detection_delay: float = Field(48, description="hours")

    # Model performance
    current_model_accuracy: float = Field(85, description="percent")
    expected_accuracy_gain: float = Field(5, description="percent")
    inference_latency_ms: float = 200
    data_quality_issues: float = 10

    # Compliance & risk
    compliance_hours_per_month: float = 40
    audit_preparation_days: float = 10
    security_incidents_year: float = 2
    model_documentation_hours: float = 15

    # Business impact
    revenue_per_model: float = 500000
    customer_churn: float = Field(5, description="percent")
    customer_satisfaction: float = Field(85, description="percent")
    market_share_percent: float = Field(12, description="percent")

    # Platform investment
    platform_subscription: float = Field(5000, description="per month")
    implementation_cost: float = 50000
    training_cost: float = 10000

    def with_value(self, name: str, value: float) -> "InputRecord":
        """Return a new snapshot with a single field replaced."""
        if name not in type(self).model_fields:
            raise KeyError(name)
        return self.model_copy(update={name: float(value)})


class HourlyRates(BaseModel):
    ds: float
    ml: float
    devops: float
    pm: float


class LineItems(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="constants")

    experimentation: float
    data_preparation: float
    deployment: float
    failure_reduction: float
    infrastructure: float
    monitoring: float
    incident_resolution: float
    accuracy: float
    latency: float
    compliance: float
    audit: float
    time_to_market: float
    customer_retention: float

    def total(self) -> float:
        # Summed in declaration order; the order fixes the rounding of the total.
        total = 0.0
        for value in self.model_dump().values():
            total += value
        return total


class CategorySubtotals(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="constants")

    development: float
    deployment: float
    infrastructure: float
    operational: float
    performance: float
    compliance: float
    business_impact: float

    def total(self) -> float:
        return sum(self.model_dump().values())


class DerivedMetrics(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="constants")

    roi: float
    annual_savings: float
    annual_investment: float
    payback_months: float
    line_items: LineItems
    categories: CategorySubtotals


class Summary(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="constants")

    title: str
    generated_at: str
    inputs: InputRecord
    metrics: DerivedMetrics
    series: List[float]
    tiles: Dict[str, str]
    category_tiles: Dict[str, str]
    notes: List[str] = Field(default_factory=list)

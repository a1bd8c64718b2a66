from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel

from .log import logger
from .models import InputRecord


class FieldSpec(BaseModel):
    name: str
    label: str
    group: str
    minimum: float
    maximum: float
    step: float = 1
    unit: Optional[str] = None


def _spec(name: str, label: str, group: str, minimum: float, maximum: float, step: float = 1, unit: Optional[str] = None) -> FieldSpec:
    return FieldSpec(name=name, label=label, group=group, minimum=minimum, maximum=maximum, step=step, unit=unit)


TEAM = "Team Structure"
DEVELOPMENT = "Current Development"
DEPLOYMENT = "Deployment Process"
INFRASTRUCTURE = "Infrastructure"
OPERATIONS = "Monitoring & Maintenance"
PERFORMANCE = "Model Performance"
COMPLIANCE = "Compliance & Risk"
BUSINESS = "Business Impact"
INVESTMENT = "Platform Investment"

GROUPS: List[str] = [
    TEAM,
    DEVELOPMENT,
    DEPLOYMENT,
    INFRASTRUCTURE,
    OPERATIONS,
    PERFORMANCE,
    COMPLIANCE,
    BUSINESS,
    INVESTMENT,
]

# Domains drive the sliders only; the engine never enforces them.
FIELD_SPECS: List[FieldSpec] = [
    _spec("data_scientists", "Data Scientists", TEAM, 0, 50),
    _spec("ml_engineers", "ML Engineers", TEAM, 0, 50),
    _spec("devops_engineers", "DevOps Engineers", TEAM, 0, 50),
    _spec("project_managers", "Project Managers", TEAM, 0, 20),
    _spec("avg_ds_annual_salary", "Avg. Data Scientist Salary ($)", TEAM, 0, 500000, 5000, "$"),
    _spec("avg_ml_annual_salary", "Avg. ML Engineer Salary ($)", TEAM, 0, 500000, 5000, "$"),
    _spec("avg_devops_annual_salary", "Avg. DevOps Salary ($)", TEAM, 0, 500000, 5000, "$"),
    _spec("avg_pm_annual_salary", "Avg. Project Manager Salary ($)", TEAM, 0, 500000, 5000, "$"),
    _spec("experiments_per_month", "Experiments per Month", DEVELOPMENT, 0, 500),
    _spec("experiment_tracking_hours", "Experiment Tracking Hours", DEVELOPMENT, 0, 100, unit="h"),
    _spec("model_iterations", "Model Iterations", DEVELOPMENT, 0, 100),
    _spec("data_preparation_hours", "Data Preparation Hours", DEVELOPMENT, 0, 200, unit="h"),
    _spec("deployments_per_month", "Deployments per Month", DEPLOYMENT, 0, 20),
    _spec("current_deployment_time", "Deployment Time (months)", DEPLOYMENT, 0, 12, 0.1, "months"),
    _spec("deployment_failure_rate", "Deployment Failure Rate (%)", DEPLOYMENT, 0, 100, unit="%"),
    _spec("rollback_time", "Rollback Time (hours)", DEPLOYMENT, 0, 72, unit="h"),
    _spec("monthly_compute_costs", "Monthly Compute Costs ($)", INFRASTRUCTURE, 0, 200000, 1000, "$"),
    _spec("monthly_storage_costs", "Monthly Storage Costs ($)", INFRASTRUCTURE, 0, 100000, 1000, "$"),
    _spec("monthly_serving_costs", "Monthly Serving Costs ($)", INFRASTRUCTURE, 0, 100000, 1000, "$"),
    _spec("gpu_utilization", "GPU Utilization (%)", INFRASTRUCTURE, 0, 100, unit="%"),
    _spec("monitoring_hours_per_week", "Monitoring Hours per Week", OPERATIONS, 0, 100, unit="h"),
    _spec("incidents_per_month", "Incidents per Month", OPERATIONS, 0, 50),
    _spec("mttr", "Mean Time to Repair (hours)", OPERATIONS, 0, 72, unit="h"),
    _spec("drift_detection_delay", "Drift Detection Delay (hours)", OPERATIONS, 0, 336, unit="h"),
    _spec("current_model_accuracy", "Current Model Accuracy (%)", PERFORMANCE, 0, 100, unit="%"),
    _spec("expected_accuracy_gain", "Expected Accuracy Gain (%)", PERFORMANCE, 0, 50, 0.5, "%"),
    _spec("inference_latency_ms", "Inference Latency (ms)", PERFORMANCE, 0, 2000, 10, "ms"),
    _spec("data_quality_issues", "Data Quality Issues", PERFORMANCE, 0, 100),
    _spec("compliance_hours_per_month", "Compliance Hours per Month", COMPLIANCE, 0, 200, unit="h"),
    _spec("audit_preparation_days", "Audit Preparation Days", COMPLIANCE, 0, 60, unit="days"),
    _spec("security_incidents_year", "Security Incidents per Year", COMPLIANCE, 0, 50),
    _spec("model_documentation_hours", "Model Documentation Hours", COMPLIANCE, 0, 100, unit="h"),
    _spec("revenue_per_model", "Revenue per Model ($)", BUSINESS, 0, 10000000, 10000, "$"),
    _spec("customer_churn", "Customer Churn (%)", BUSINESS, 0, 100, 0.5, "%"),
    _spec("customer_satisfaction", "Customer Satisfaction (%)", BUSINESS, 0, 100, unit="%"),
    _spec("market_share_percent", "Market Share (%)", BUSINESS, 0, 100, 0.5, "%"),
    _spec("platform_subscription", "Platform Subscription ($/month)", INVESTMENT, 0, 20000, 100, "$"),
    _spec("implementation_cost", "Implementation Cost ($)", INVESTMENT, 0, 200000, 1000, "$"),
    _spec("training_cost", "Training Cost ($)", INVESTMENT, 0, 50000, 1000, "$"),
]

_BY_NAME: Dict[str, FieldSpec] = {spec.name: spec for spec in FIELD_SPECS}

PERCENT_FIELDS: List[str] = [spec.name for spec in FIELD_SPECS if spec.unit == "%"]


def field_spec(name: str) -> FieldSpec:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown input field: {name}") from None


def fields_in_group(group: str) -> List[FieldSpec]:
    return [spec for spec in FIELD_SPECS if spec.group == group]


def default_inputs() -> InputRecord:
    return InputRecord()


def write_default_inputs(out_path: Path, by_alias: bool = False) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    data = default_inputs().model_dump(by_alias=by_alias)
    out_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    logger.info("Wrote default inputs to {}", out_path)
    return out_path

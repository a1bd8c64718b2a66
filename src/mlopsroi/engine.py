from __future__ import annotations

import math
from typing import List

from . import constants as c
from .defaults import FIELD_SPECS, PERCENT_FIELDS
from .formatting import category_tiles, headline_tiles
from .log import logger
from .models import CategorySubtotals, DerivedMetrics, HourlyRates, InputRecord, LineItems, Summary
from .series import cumulative_series
from .utils import safe_divide, utc_now_iso

REPORT_TITLE = "MLOps Platform ROI Projection"


def hourly_rates(inputs: InputRecord) -> HourlyRates:
    return HourlyRates(
        ds=inputs.avg_ds_annual_salary / c.HOURS_PER_YEAR,
        ml=inputs.avg_ml_annual_salary / c.HOURS_PER_YEAR,
        devops=inputs.avg_devops_annual_salary / c.HOURS_PER_YEAR,
        pm=inputs.avg_pm_annual_salary / c.HOURS_PER_YEAR,
    )


def compute_line_items(inputs: InputRecord) -> LineItems:
    # Operand order matches the published model so results reproduce bit-for-bit.
    x = inputs
    rates = hourly_rates(x)
    engineering_cost = rates.ml * x.ml_engineers + rates.devops * x.devops_engineers
    engineering_rate = rates.ml + rates.devops
    engineering_heads = x.ml_engineers + x.devops_engineers

    experimentation = (
        x.experiments_per_month
        * x.experiment_tracking_hours
        * c.EXPERIMENTATION_CAPTURE
        * c.MONTHS_PER_YEAR
        * rates.ds
        * x.data_scientists
    )
    data_preparation = (
        x.data_preparation_hours
        * x.deployments_per_month
        * c.MONTHS_PER_YEAR
        * rates.ds
        * x.data_scientists
        * c.DATA_PREPARATION_CAPTURE
    )
    deployment = (
        x.current_deployment_time
        * c.HOURS_PER_MONTH
        * x.deployments_per_month
        * c.MONTHS_PER_YEAR
        * engineering_cost
        * c.DEPLOYMENT_CAPTURE
    )
    failure_reduction = (
        x.deployment_failure_rate
        * c.FAILURE_REDUCTION_CAPTURE
        * x.deployments_per_month
        * c.MONTHS_PER_YEAR
        * x.rollback_time
        * engineering_rate
        * engineering_heads
    )
    monthly_spend = x.monthly_compute_costs + x.monthly_storage_costs + x.monthly_serving_costs
    infrastructure = (
        monthly_spend * ((c.PERCENT - x.gpu_utilization) / c.PERCENT) * c.INFRASTRUCTURE_CAPTURE
    ) * c.MONTHS_PER_YEAR
    monitoring = x.monitoring_hours_per_week * c.WEEKS_PER_YEAR * engineering_cost * c.MONITORING_CAPTURE
    incident_resolution = (
        x.incidents_per_month
        * c.MONTHS_PER_YEAR
        * x.mttr
        * engineering_rate
        * engineering_heads
        * c.INCIDENT_RESOLUTION_CAPTURE
    )
    accuracy = (
        (x.expected_accuracy_gain / c.PERCENT) * x.revenue_per_model * x.deployments_per_month * c.MONTHS_PER_YEAR
    )
    latency = (x.inference_latency_ms * c.LATENCY_IMPROVEMENT) * (x.revenue_per_model * c.LATENCY_REVENUE_SHARE)
    compliance = (
        x.compliance_hours_per_month * c.MONTHS_PER_YEAR * rates.ml * x.ml_engineers * c.COMPLIANCE_CAPTURE
    )
    audit = (
        x.audit_preparation_days
        * c.HOURS_PER_DAY
        * (rates.ml + rates.pm)
        * (x.ml_engineers + x.project_managers)
        * c.AUDIT_CAPTURE
    )
    time_to_market = (
        x.current_deployment_time
        * c.TIME_TO_MARKET_REDUCTION
        * (x.revenue_per_model * c.TIME_TO_MARKET_REVENUE_SHARE)
        * x.deployments_per_month
        * c.MONTHS_PER_YEAR
    )
    customer_retention = x.customer_churn * c.CHURN_REDUCTION * x.revenue_per_model * c.RETENTION_REVENUE_SHARE

    return LineItems(
        experimentation=experimentation,
        data_preparation=data_preparation,
        deployment=deployment,
        failure_reduction=failure_reduction,
        infrastructure=infrastructure,
        monitoring=monitoring,
        incident_resolution=incident_resolution,
        accuracy=accuracy,
        latency=latency,
        compliance=compliance,
        audit=audit,
        time_to_market=time_to_market,
        customer_retention=customer_retention,
    )


def group_categories(items: LineItems) -> CategorySubtotals:
    return CategorySubtotals(
        development=items.experimentation + items.data_preparation,
        deployment=items.deployment + items.failure_reduction,
        infrastructure=items.infrastructure,
        operational=items.monitoring + items.incident_resolution,
        performance=items.accuracy + items.latency,
        compliance=items.compliance + items.audit,
        business_impact=items.time_to_market + items.customer_retention,
    )


def annual_investment(inputs: InputRecord) -> float:
    return inputs.platform_subscription * c.MONTHS_PER_YEAR + inputs.implementation_cost + inputs.training_cost


def compute(inputs: InputRecord) -> DerivedMetrics:
    """Recompute every derived metric from a full input snapshot.

    Never raises on arithmetic: a zero investment or zero benefits produce
    infinite or NaN ROI/payback for the caller to present.
    """
    items = compute_line_items(inputs)
    total_benefits = items.total()
    investment = annual_investment(inputs)

    roi = safe_divide(total_benefits - investment, investment) * c.PERCENT
    payback = safe_divide(investment, total_benefits / c.MONTHS_PER_YEAR)

    logger.debug(
        "Computed roi={:.2f}% savings={:.2f} investment={:.2f} payback={:.3f}",
        roi,
        total_benefits,
        investment,
        payback,
    )
    return DerivedMetrics(
        roi=roi,
        annual_savings=total_benefits,
        annual_investment=investment,
        payback_months=payback,
        line_items=items,
        categories=group_categories(items),
    )


def advisory_notes(inputs: InputRecord, metrics: DerivedMetrics) -> List[str]:
    notes: List[str] = []
    values = inputs.model_dump()

    if metrics.annual_investment == 0:
        notes.append("Annual investment is zero; ROI is not a finite percentage.")
    elif metrics.annual_savings <= 0:
        notes.append("Total benefits are not positive; the investment is never paid back.")

    out_of_range = [name for name in PERCENT_FIELDS if not 0 <= values[name] <= 100]
    if out_of_range:
        notes.append(f"Percentage fields outside 0-100 were used as given: {', '.join(out_of_range)}.")

    negative = [spec.name for spec in FIELD_SPECS if values[spec.name] < 0]
    if negative:
        notes.append(f"Negative inputs were used as given: {', '.join(negative)}.")

    non_finite = [name for name, value in values.items() if not math.isfinite(value)]
    if non_finite:
        notes.append(f"Non-numeric inputs produce undefined results: {', '.join(non_finite)}.")

    return notes


def summarize(inputs: InputRecord, currency_symbol: str = "$") -> Summary:
    metrics = compute(inputs)
    return Summary(
        title=REPORT_TITLE,
        generated_at=utc_now_iso(),
        inputs=inputs,
        metrics=metrics,
        series=cumulative_series(metrics),
        tiles=headline_tiles(metrics, currency_symbol),
        category_tiles=category_tiles(metrics.categories, currency_symbol),
        notes=advisory_notes(inputs, metrics),
    )

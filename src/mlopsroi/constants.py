"""Fixed assumptions of the ROI model.

Capture fractions are the share of theoretical savings an organization is
assumed to realize after adopting the platform. They are part of the model,
not inputs, and changing any of them changes every published figure.
"""

from __future__ import annotations

HOURS_PER_YEAR = 2080.0
MONTHS_PER_YEAR = 12
WEEKS_PER_YEAR = 52
HOURS_PER_MONTH = 160
HOURS_PER_DAY = 8
PERCENT = 100.0

# Capture fractions
EXPERIMENTATION_CAPTURE = 0.6
DATA_PREPARATION_CAPTURE = 0.4
DEPLOYMENT_CAPTURE = 0.7
FAILURE_REDUCTION_CAPTURE = 0.6
INFRASTRUCTURE_CAPTURE = 0.4
MONITORING_CAPTURE = 0.5
INCIDENT_RESOLUTION_CAPTURE = 0.6
COMPLIANCE_CAPTURE = 0.4
AUDIT_CAPTURE = 0.5

# Heuristic multipliers for revenue-side benefits
LATENCY_IMPROVEMENT = 0.3
LATENCY_REVENUE_SHARE = 0.05
TIME_TO_MARKET_REDUCTION = 0.7
TIME_TO_MARKET_REVENUE_SHARE = 0.1
CHURN_REDUCTION = 0.2
RETENTION_REVENUE_SHARE = 0.1

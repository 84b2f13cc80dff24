# utils/csm_stats/constants.py
"""
Constants for CSM Stats

VERSION: 1.0.0
"""

# =============================================================================
# CLIENT STATUSES
# =============================================================================
STATUS_ACTIVE = "Active"
STATUS_CC_DECLINED = "CC Declined"

# =============================================================================
# SOURCE COLUMNS
# =============================================================================
CLIENT_COLUMNS = [
    "id", "csm_name", "status",
    "started_on", "churned_on",
    "form_complete_time", "onboarding_call_time", "launch_call_time",
    "last_meaningful_activity_time",
    "minutes_to_first_value", "minutes_to_100_usage",
    "total_usage", "new_reviews", "new_website_leads",
]

TIMESTAMP_COLUMNS = [
    "started_on", "churned_on",
    "form_complete_time", "onboarding_call_time", "launch_call_time",
    "last_meaningful_activity_time",
]

NUMERIC_COLUMNS = [
    "minutes_to_first_value", "minutes_to_100_usage",
    "total_usage", "new_reviews", "new_website_leads",
]

# =============================================================================
# THRESHOLDS (overridable through config)
# =============================================================================
DEFAULT_INACTIVE_DAYS = 30
DEFAULT_ACTIVATION_THRESHOLD_MINUTES = 30 * 24 * 60  # 30 days

# =============================================================================
# OUTPUT COLUMNS
# =============================================================================
ONBOARDING_COUNT_FIELDS = [
    "new_clients", "forms_missing", "onboard_call_show",
    "launch_call_show", "activated_under_30_days",
]

RETENTION_COUNT_FIELDS = [
    "clients_managing", "csat_count", "cc_declined", "churned",
]

# Retention averages rolled up weighted by clients_managing
RETENTION_MANAGING_WEIGHTED_FIELDS = [
    "chi", "inactive_clients_pct", "refund_dispute_rate",
    "avg_monthly_usage_per_client", "avg_monthly_reviews", "avg_monthly_new_leads",
]

# utils/sales_stats/constants.py
"""
Constants for Sales Stats

VERSION: 1.0.0
"""

# =============================================================================
# STATUS VALUES (compared lower-cased)
# =============================================================================
APPOINTMENT_SHOWED = "showed"
OPPORTUNITY_WON = "won"
OPPORTUNITY_TRIAL = "trial"

# =============================================================================
# SOURCE COLUMNS
# =============================================================================
APPOINTMENT_COLUMNS = [
    "id", "created_at", "company", "name", "status",
    "appointment_date", "setter", "closer",
]

OPPORTUNITY_COLUMNS = [
    "id", "created_at", "company", "name", "status",
    "setter", "closer", "updated_at", "upgrade",
]

# =============================================================================
# PLACEHOLDERS
# =============================================================================
TIME_TO_CONTACT_PLACEHOLDER = "TODO"

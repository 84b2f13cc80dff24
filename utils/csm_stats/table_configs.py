# utils/csm_stats/table_configs.py
"""Column metadata for the CSM Stats tables."""

from utils.common.data_table import TableColumn, TableConfig

CLIENT_ONBOARDING_CONFIG = TableConfig(
    title="Client Onboarding",
    columns=[
        TableColumn("csm", "CSM", "text", "Customer success manager"),
        TableColumn("new_clients", "New Clients", "integer", "New clients in period"),
        TableColumn("forms_missing", "Forms Missing", "integer", "Clients missing onboarding form"),
        TableColumn("form_complete_pct", "Form Complete %", "percentage", "% forms completed"),
        TableColumn("form_complete_time_avg", "Form Complete Time (avg)", "duration",
                    "Average time to complete form"),
        TableColumn("onboard_call_show", "Onboard Call Show", "integer", "Onboarding call shows"),
        TableColumn("onboard_call_show_pct", "Onboard Call Show %", "percentage",
                    "% onboarding call shows"),
        TableColumn("time_to_onboard_call_avg", "Time To Onboard Call (avg)", "duration",
                    "Avg time to onboarding call"),
        TableColumn("launch_call_show", "Launch Call Show", "integer", "Launch call shows"),
        TableColumn("launch_call_show_pct", "Launch Call Show %", "percentage",
                    "% launch call shows"),
        TableColumn("time_to_launch_call_avg", "Time To Launch Call (avg)", "duration",
                    "Avg time to launch call"),
        TableColumn("ttfv", "TTFV", "duration", "Time to first value"),
        TableColumn("tta", "TTA", "duration", "Time to activation"),
        TableColumn("activated_under_30_days", "Activated <30d", "integer",
                    "Clients activated <30 days"),
        TableColumn("activated_under_30_days_pct", "% Activated <30d", "percentage",
                    "% activated within 30 days"),
    ],
    sticky_columns=["csm"],
    pin_last_row=True,
)

CUSTOMER_RETENTION_CONFIG = TableConfig(
    title="Customer Retention",
    columns=[
        TableColumn("csm", "CSM", "text", "Customer success manager"),
        TableColumn("clients_managing", "Clients Managing", "integer", "Active clients per CSM"),
        TableColumn("chi", "CHI", "todo", "Customer Health Index"),
        TableColumn("inactive_clients_pct", "% Inactive Clients", "percentage",
                    "% active clients without meaningful activity in the last 30 days"),
        TableColumn("avg_monthly_usage_per_client", "Avg Monthly Usage Per Client", "number",
                    "Average monthly usage per client"),
        TableColumn("avg_monthly_reviews", "Avg Monthly Reviews", "number",
                    "Average reviews per month"),
        TableColumn("avg_monthly_new_leads", "Avg Monthly New Leads", "number",
                    "Average new leads per month"),
        TableColumn("csat_count", "CSAT Count", "todo", "Number of CSAT responses"),
        TableColumn("csat_good_pct", "CSAT Good %", "todo", "% positive CSAT"),
        TableColumn("cc_declined", "CC Declined", "integer", "Declined credit cards"),
        TableColumn("cc_declined_rate", "CC Declined Rate", "percentage", "% CC declined"),
        TableColumn("refund_dispute_rate", "Refund/Dispute Rate", "todo", "% refunds or disputes"),
        TableColumn("churned", "# Churned", "integer", "Clients churned in period"),
        TableColumn("churn_rate", "Churn Rate", "percentage", "% clients churned"),
    ],
    sticky_columns=["csm"],
    pin_last_row=True,
)

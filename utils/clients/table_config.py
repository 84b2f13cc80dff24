# utils/clients/table_config.py
"""Column metadata for the Clients table."""

from utils.common.data_table import TableColumn, TableConfig

CLIENTS_SEARCH_WEIGHTS = {
    "company_name": 3,
    "name": 2,
    "status": 1.5,
    "csm_name": 1.25,
    "referrer": 1,
    "email": 1,
    "phone": 0.75,
    "website": 0.5,
}

CLIENTS_TABLE_CONFIG = TableConfig(
    title="Clients",
    columns=[
        # Identity / status
        TableColumn("company_name", "Company Name", "text"),
        TableColumn("name", "Name", "text"),
        TableColumn("status", "Status", "text"),
        TableColumn("csm_name", "CSM Name", "text"),

        # Activity and usage
        TableColumn("last_meaningful_activity_time", "Last Activity Time", "timestamp",
                    "Most recent meaningful client action"),
        TableColumn("total_usage", "Total Usage", "integer", "Cumulative usage count"),
        TableColumn("new_reviews", "New Reviews", "integer", "Reviews received recently"),
        TableColumn("new_website_leads", "New Website Leads", "integer", "Leads captured on site"),
        TableColumn("inbound_calls", "Inbound Calls", "integer", "Total inbound calls"),
        TableColumn("minutes_to_first_value", "Minutes to First Value", "number",
                    "Time to first meaningful value"),
        TableColumn("minutes_to_100_usage", "Minutes to 100 Usage", "number",
                    "Time to reach first 100 usage units"),

        # Timelines
        TableColumn("started_on", "Started On", "timestamp", "Service start date"),
        TableColumn("created_at", "Created At", "timestamp", "Record creation date"),
        TableColumn("form_complete_time", "Form Complete Time", "timestamp",
                    "Onboarding form completion time"),
        TableColumn("onboarding_call_time", "Onboarding Call Time", "timestamp",
                    "Scheduled onboarding call time"),
        TableColumn("launch_call_time", "Launch Call Time", "timestamp",
                    "Scheduled launch call time"),
        TableColumn("churned_on", "Churned On", "timestamp", "Churn date if applicable"),

        # IDs / contact
        TableColumn("client_id", "Contact ID", "text", "CRM contact identifier"),
        TableColumn("location_id", "Location ID", "text", "CRM location identifier"),
        TableColumn("website", "Website Link", "text", "Client website URL"),
        TableColumn("phone", "Phone Number", "text", "Primary phone"),
        TableColumn("email", "E-mail", "text", "Primary email"),
        TableColumn("stripe_customer_id", "Stripe Customer ID", "text", "Stripe customer reference"),

        # Delivery
        TableColumn("site_done_at", "Site Done", "timestamp", "Website delivery date"),
        TableColumn("delivery_person", "Delivery Person", "text", "Assigned delivery owner"),
        TableColumn("a2p_provider", "A2P", "text", "A2P registration status"),
        TableColumn("ai_content_created", "AI Content Created", "text", "AI content status"),

        # Acquisition / cancellation
        TableColumn("referrer", "Referrer", "text", "Lead source referrer"),
        TableColumn("cancellation_reason", "Cancellation Reason", "text", "Stated reason for cancel"),
        TableColumn("cancellation_notes", "Cancellation Notes", "text", "Additional cancellation notes"),
    ],
    search_weights=CLIENTS_SEARCH_WEIGHTS,
    sticky_columns=["company_name", "status"],
    show_count_in_title=True,
)

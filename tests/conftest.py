"""
Pytest configuration and shared fixtures.

This module provides:
- Environment variable setup for tests (config raises without DB settings)
- Client / appointment / opportunity / revision log frames
"""

import os
import sys
from datetime import date
from pathlib import Path

import pandas as pd
import pytest


# Set test environment variables BEFORE any imports of utils
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_USER", "test_user")
os.environ.setdefault("DB_PASSWORD", "test_password")
os.environ.setdefault("DB_NAME", "test_db")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def june_range():
    """June 2025, both ends inclusive."""
    from utils.common.date_range import DateRange
    return DateRange(date(2025, 6, 1), date(2025, 6, 30))


@pytest.fixture
def reference_now():
    return pd.Timestamp("2025-06-30 12:00:00")


@pytest.fixture
def clients_df():
    """Clients for two CSMs; rows 1, 2 and 5 started in June."""
    return pd.DataFrame([
        {
            "id": 1, "csm_name": "Ben Zazueta", "status": "Active",
            "started_on": "2025-06-02T00:00:00Z",
            "form_complete_time": "2025-06-03T02:00:00Z",
            "onboarding_call_time": "2025-06-04T00:00:00Z",
            "launch_call_time": None,
            "churned_on": None,
            "last_meaningful_activity_time": "2025-06-25T00:00:00Z",
            "minutes_to_first_value": 120, "minutes_to_100_usage": 1000,
            "total_usage": 10, "new_reviews": 2, "new_website_leads": 1,
        },
        {
            "id": 2, "csm_name": "Ben Zazueta", "status": "Active",
            "started_on": "2025-06-10T00:00:00Z",
            "form_complete_time": None,
            "onboarding_call_time": "2025-06-10T12:00:00Z",
            "launch_call_time": "2025-06-12T00:00:00Z",
            "churned_on": None,
            "last_meaningful_activity_time": None,
            "minutes_to_first_value": None, "minutes_to_100_usage": 50000,
            "total_usage": None, "new_reviews": 4, "new_website_leads": None,
        },
        {
            "id": 3, "csm_name": "Ben Zazueta", "status": "CC Declined",
            "started_on": "2025-05-01T00:00:00Z",
            "form_complete_time": None,
            "onboarding_call_time": None,
            "launch_call_time": None,
            "churned_on": "2025-06-15T00:00:00Z",
            "last_meaningful_activity_time": "2025-01-01T00:00:00Z",
            "minutes_to_first_value": None, "minutes_to_100_usage": None,
            "total_usage": 5, "new_reviews": 0, "new_website_leads": 3,
        },
        {
            "id": 4, "csm_name": "Ryan Grant", "status": "Active",
            "started_on": "2025-07-01T00:00:00Z",
            "form_complete_time": None,
            "onboarding_call_time": None,
            "launch_call_time": None,
            "churned_on": None,
            "last_meaningful_activity_time": "2025-05-01T00:00:00Z",
            "minutes_to_first_value": None, "minutes_to_100_usage": None,
            "total_usage": 7, "new_reviews": None, "new_website_leads": None,
        },
        {
            "id": 5, "csm_name": "Ryan Grant", "status": "Churned",
            "started_on": "2025-06-30T10:00:00Z",
            "form_complete_time": "2025-06-29T00:00:00Z",
            "onboarding_call_time": None,
            "launch_call_time": None,
            "churned_on": "2025-06-30T23:00:00Z",
            "last_meaningful_activity_time": None,
            "minutes_to_first_value": 0, "minutes_to_100_usage": 43200,
            "total_usage": None, "new_reviews": None, "new_website_leads": None,
        },
    ])


@pytest.fixture
def appointments_df():
    return pd.DataFrame([
        {"id": 1, "company": "Acme", "name": "Ann", "status": "showed",
         "appointment_date": "2025-06-05T15:00:00Z", "setter": "Javier Ulloa", "closer": "Dale Kelley"},
        {"id": 2, "company": "Beta", "name": "Bob", "status": "showed",
         "appointment_date": "2025-06-06T15:00:00Z", "setter": "Javier Ulloa", "closer": "Melo Moore"},
        {"id": 3, "company": "Gamma", "name": "Gus", "status": "no show",
         "appointment_date": "2025-06-07T15:00:00Z", "setter": "Javier Ulloa", "closer": "Dale Kelley"},
        {"id": 4, "company": "Delta", "name": "Dee", "status": "Showed",
         "appointment_date": "2025-06-08T15:00:00Z", "setter": "Javier Ulloa / Juan Parada",
         "closer": "Jay Rojas"},
        {"id": 5, "company": "Eps", "name": "Eve", "status": "showed",
         "appointment_date": "2025-07-02T15:00:00Z", "setter": "Juan Parada", "closer": "Jay Rojas"},
        {"id": 6, "company": "Zeta", "name": "Zed", "status": "showed",
         "appointment_date": "2025-06-09T15:00:00Z", "setter": "Someone Else", "closer": "Other Closer"},
        {"id": 7, "company": "Eta", "name": "Ed", "status": "cancelled",
         "appointment_date": "2025-06-10T15:00:00Z", "setter": "", "closer": None},
    ])


@pytest.fixture
def opportunities_df():
    return pd.DataFrame([
        {"id": 1, "company": "Acme", "name": "Ann", "status": "Won", "closer": "Dale Kelley",
         "updated_at": "2025-06-10T00:00:00Z", "upgrade": True},
        {"id": 2, "company": "Beta", "name": "Bob", "status": "lost", "closer": "Dale Kelley",
         "updated_at": "2025-06-11T00:00:00Z", "upgrade": False},
        {"id": 3, "company": "Theta", "name": "Tia", "status": "trial", "closer": "Dale Kelley",
         "updated_at": "2025-06-12T00:00:00Z", "upgrade": None},
        {"id": 4, "company": "Iota", "name": "Ivy", "status": "won", "closer": " Jay Rojas ",
         "updated_at": "2025-06-13T00:00:00Z", "upgrade": True},
        {"id": 5, "company": "Kappa", "name": "Kim", "status": "won", "closer": "Jay Rojas",
         "updated_at": "2025-05-20T00:00:00Z", "upgrade": True},
        {"id": 6, "company": "Lambda", "name": "Lee", "status": "WON", "closer": "Jay Rojas",
         "updated_at": "2025-06-20T00:00:00Z", "upgrade": False},
    ])


@pytest.fixture
def va_clients_df():
    return pd.DataFrame([
        {"id": 1, "company_name": "A1", "delivery_person": "Ana",
         "started_on": "2025-06-01T00:00:00Z", "site_done_at": "2025-06-03T00:00:00Z"},
        {"id": 2, "company_name": "A2", "delivery_person": "Ana",
         "started_on": "2025-06-01T00:00:00Z", "site_done_at": "2025-06-02T12:00:00Z"},
        {"id": 3, "company_name": "A3", "delivery_person": "Ana",
         "started_on": "2025-05-01T00:00:00Z", "site_done_at": None},
        {"id": 4, "company_name": "A4", "delivery_person": "Ana",
         "started_on": None, "site_done_at": None},
        {"id": 5, "company_name": "Y1", "delivery_person": "Yennifer",
         "started_on": "2025-06-01T00:00:00Z", "site_done_at": "2025-06-05T00:00:00Z"},
        {"id": 6, "company_name": "L1", "delivery_person": "Luis",
         "started_on": "2025-06-20T00:00:00Z", "site_done_at": "2025-06-10T00:00:00Z"},
    ])


@pytest.fixture
def revision_logs_df():
    return pd.DataFrame([
        {"id": 1, "created_at": "2025-06-05T00:00:00Z", "task_name": "Fix header", "task_id": "t1",
         "asignee": "Ana", "finished_at": "2025-06-05T01:30:00Z"},
        {"id": 2, "created_at": "2025-06-06T00:00:00Z", "task_name": "New page", "task_id": "t2",
         "asignee": "Ana", "finished_at": None},
        {"id": 3, "created_at": "2025-06-01T00:00:00Z", "task_name": "Logo", "task_id": "t3",
         "asignee": "Marco", "finished_at": "2025-06-02T00:00:00Z"},
        {"id": 4, "created_at": "2025-06-01T00:00:00Z", "task_name": "Unknown", "task_id": "t4",
         "asignee": "No match", "finished_at": "2025-06-02T00:00:00Z"},
        {"id": 5, "created_at": "2025-06-01T00:00:00Z", "task_name": "Blank", "task_id": "t5",
         "asignee": "  ", "finished_at": None},
    ])

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for activity_log_service."""

from datetime import datetime, timedelta

from dispatchdesk.models import ActivityAction, ActivityCategory, ActivityLog
from dispatchdesk.services import activity_log_service


def add_entries(db, user, count: int, category=ActivityCategory.TICKET):
    for i in range(count):
        activity_log_service.log_activity(
            db,
            user,
            ActivityAction.TICKET_CREATED,
            category,
            f"Created ticket T-{i}",
            target_id=f"T-{i}",
            target_type="ticket",
        )
    db.commit()


def test_log_activity_records_actor(seeded, admin_user):
    entry = activity_log_service.log_activity(
        seeded,
        admin_user,
        ActivityAction.USER_APPROVED,
        ActivityCategory.USER,
        "Approved someone",
        changes={"approved": True},
    )
    seeded.commit()

    assert entry.user_id == str(admin_user.id)
    assert entry.user_email == "admin@example.com"
    assert entry.category == "USER"
    assert entry.changes == {"approved": True}


def test_log_activity_is_rolled_back_with_caller(seeded, admin_user):
    activity_log_service.log_activity(
        seeded, admin_user, ActivityAction.USER_DELETED, ActivityCategory.USER, "Deleted"
    )
    seeded.rollback()
    assert seeded.query(ActivityLog).count() == 0


def test_query_logs_filters_and_pages(seeded, admin_user):
    add_entries(seeded, admin_user, 5)
    add_entries(seeded, admin_user, 2, category=ActivityCategory.DEPARTMENT)

    result = activity_log_service.query_logs(seeded, category="TICKET", page=1, page_size=2)
    assert result["total"] == 5
    assert len(result["logs"]) == 2
    assert all(entry.category == "TICKET" for entry in result["logs"])

    last_page = activity_log_service.query_logs(seeded, category="TICKET", page=3, page_size=2)
    assert len(last_page["logs"]) == 1


def test_query_logs_clamps_page_size(seeded, admin_user):
    result = activity_log_service.query_logs(seeded, page=0, page_size=10_000)
    assert result["page"] == 1
    assert result["page_size"] == activity_log_service.MAX_PAGE_SIZE


def test_query_logs_time_window(seeded, admin_user):
    add_entries(seeded, admin_user, 1)
    future = datetime.utcnow() + timedelta(days=1)
    assert activity_log_service.query_logs(seeded, since=future)["total"] == 0
    assert activity_log_service.query_logs(seeded, until=future)["total"] == 1


def test_get_categories(seeded, admin_user):
    add_entries(seeded, admin_user, 1)
    add_entries(seeded, admin_user, 1, category=ActivityCategory.DEPARTMENT)
    assert activity_log_service.get_categories(seeded) == ["DEPARTMENT", "TICKET"]

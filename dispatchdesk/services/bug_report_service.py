# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Bug report submission and review."""

import uuid

from sqlalchemy.orm import Session

from dispatchdesk.models import ActivityAction, ActivityCategory, BugReport, User
from dispatchdesk.rbac.capabilities import Capability
from dispatchdesk.schemas.bug_report import BugReportCreate
from dispatchdesk.services import activity_log_service, permission_service


def get_bug_reports(db: Session, actor: User) -> list[BugReport]:
    """Get all bug reports, newest first."""
    permission_service.require_capability(db, actor, Capability.VIEW_BUG_REPORTS)
    return db.query(BugReport).order_by(BugReport.created_at.desc()).all()


def count_bug_reports(db: Session, actor: User) -> int:
    permission_service.require_capability(db, actor, Capability.VIEW_BUG_REPORTS)
    return db.query(BugReport).count()


def get_bug_report(db: Session, report_id: uuid.UUID) -> BugReport | None:
    return db.query(BugReport).filter(BugReport.id == report_id).first()


def submit_bug_report(db: Session, actor: User, data: BugReportCreate) -> BugReport:
    """File a bug report in the name of the acting user."""
    permission_service.require_capability(db, actor, Capability.SUBMIT_BUG_REPORT)
    report = BugReport(
        message=data.message,
        submitted_by_id=actor.id,
        submitted_by_name=actor.display_name,
    )
    db.add(report)
    db.flush()
    activity_log_service.log_activity(
        db,
        actor,
        ActivityAction.BUG_REPORT_SUBMITTED,
        ActivityCategory.BUG_REPORT,
        "Submitted a bug report",
        target_id=report.id,
        target_type="bug_report",
    )
    db.commit()
    db.refresh(report)
    return report


def delete_bug_report(db: Session, actor: User, report: BugReport) -> None:
    permission_service.require_capability(db, actor, Capability.VIEW_BUG_REPORTS)
    activity_log_service.log_activity(
        db,
        actor,
        ActivityAction.BUG_REPORT_DELETED,
        ActivityCategory.BUG_REPORT,
        f"Deleted bug report from {report.submitted_by_name}",
        target_id=report.id,
        target_type="bug_report",
    )
    db.delete(report)
    db.commit()

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Bug report API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from dispatchdesk.api.deps import get_current_user, get_db, require_capability
from dispatchdesk.models import BugReport, User
from dispatchdesk.rbac.capabilities import Capability
from dispatchdesk.schemas.bug_report import BugReportCount, BugReportCreate, BugReportResponse
from dispatchdesk.services import bug_report_service

router = APIRouter()


@router.get("", response_model=list[BugReportResponse])
def list_bug_reports(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[BugReport]:
    """List bug reports, newest first. Requires viewBugReports."""
    return bug_report_service.get_bug_reports(db, current_user)


@router.get("/count", response_model=BugReportCount)
def count_bug_reports(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> BugReportCount:
    """Requires viewBugReports."""
    return BugReportCount(count=bug_report_service.count_bug_reports(db, current_user))


@router.post("", response_model=BugReportResponse, status_code=status.HTTP_201_CREATED)
def submit_bug_report(
    data: BugReportCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> BugReport:
    """Submit a bug report. Requires submitBugReport."""
    return bug_report_service.submit_bug_report(db, current_user, data)


@router.delete("/{report_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_bug_report(
    report_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_capability(Capability.VIEW_BUG_REPORTS)),
) -> None:
    """Delete a bug report. Requires viewBugReports."""
    report = bug_report_service.get_bug_report(db, report_id)
    if not report:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Bug report not found",
        )
    bug_report_service.delete_bug_report(db, current_user, report)

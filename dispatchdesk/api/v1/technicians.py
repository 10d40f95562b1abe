# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Technician API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from dispatchdesk.api.deps import get_current_user, get_db
from dispatchdesk.models import Technician, User
from dispatchdesk.schemas.department import (
    TechnicianCreate,
    TechnicianResponse,
    TechnicianUpdate,
)
from dispatchdesk.services import department_service

router = APIRouter()


def _get_technician_or_404(db: Session, technician_id: uuid.UUID) -> Technician:
    technician = department_service.get_technician(db, technician_id)
    if not technician:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Technician not found",
        )
    return technician


@router.get("", response_model=list[TechnicianResponse])
def list_technicians(
    department_id: uuid.UUID | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[Technician]:
    """List technicians, optionally only those of one department."""
    return department_service.get_technicians(db, department_id)


@router.get("/{technician_id}", response_model=TechnicianResponse)
def get_technician(
    technician_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Technician:
    return _get_technician_or_404(db, technician_id)


@router.post("", response_model=TechnicianResponse, status_code=status.HTTP_201_CREATED)
def create_technician(
    data: TechnicianCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Technician:
    """Create a technician. Requires manageTechnicians."""
    try:
        return department_service.create_technician(db, current_user, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{technician_id}", response_model=TechnicianResponse)
def update_technician(
    technician_id: uuid.UUID,
    data: TechnicianUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Technician:
    """Update a technician. Requires manageTechnicians."""
    technician = _get_technician_or_404(db, technician_id)
    try:
        return department_service.update_technician(db, current_user, technician, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{technician_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_technician(
    technician_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> None:
    """Delete a technician. Requires manageTechnicians."""
    technician = _get_technician_or_404(db, technician_id)
    department_service.delete_technician(db, current_user, technician)

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Department and technician schemas."""

import datetime
import uuid

from pydantic import BaseModel, EmailStr, Field


class DepartmentBase(BaseModel):
    """Base department schema."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    color: str | None = Field(None, max_length=20)


class DepartmentCreate(DepartmentBase):
    """Schema for creating a department."""


class DepartmentUpdate(BaseModel):
    """Schema for updating a department."""

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    color: str | None = Field(None, max_length=20)


class DepartmentResponse(DepartmentBase):
    """Schema for department response."""

    id: uuid.UUID
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}


class TechnicianBase(BaseModel):
    """Base technician schema."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str | None = Field(None, max_length=30)
    department_id: uuid.UUID | None = None


class TechnicianCreate(TechnicianBase):
    """Schema for creating a technician."""


class TechnicianUpdate(BaseModel):
    """Schema for updating a technician."""

    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=30)
    department_id: uuid.UUID | None = None


class TechnicianResponse(TechnicianBase):
    """Schema for technician response."""

    id: uuid.UUID
    email: str
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}

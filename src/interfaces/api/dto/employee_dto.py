"""Employee DTO"""

from datetime import datetime
from typing import Any

from pydantic import EmailStr, Field

from src.domain.value_objects.employee_status import EmployeeStatus
from src.interfaces.api.dto.common import CamelModel, MetadataField, NonNull, PatchModel


class CreateEmployeeRequest(CamelModel):
    """创建员工请求

    必填：firstName、lastName、email、jobTitle、departmentId。
    status 默认为 "joining"，workType 默认为 "full-time"。
    """

    employee_number: str | None = Field(default=None, max_length=50)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    personal_email: EmailStr | None = None
    phone: str | None = None
    job_title: str = Field(..., min_length=1, max_length=255)
    department_id: str = Field(..., min_length=1)
    manager_id: str | None = None
    status: EmployeeStatus = EmployeeStatus.JOINING
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str | None = None
    work_type: str | None = "full-time"
    meta: dict[str, Any] | None = MetadataField()


class UpdateEmployeeRequest(PatchModel):
    employee_number: str | None = None
    first_name: NonNull[str] = None
    last_name: NonNull[str] = None
    email: NonNull[EmailStr] = None
    personal_email: EmailStr | None = None
    phone: str | None = None
    job_title: NonNull[str] = None
    department_id: NonNull[str] = None
    manager_id: str | None = None
    status: NonNull[EmployeeStatus] = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str | None = None
    work_type: str | None = None
    meta: dict[str, Any] | None = MetadataField()


class EmployeeResponse(CamelModel):
    id: str
    employee_number: str | None = None
    first_name: str
    last_name: str
    email: str
    personal_email: str | None = None
    phone: str | None = None
    job_title: str
    department_id: str
    manager_id: str | None = None
    status: str
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str | None = None
    work_type: str | None = None
    meta: dict[str, Any] | None = MetadataField()
    created_at: datetime
    updated_at: datetime

"""Employees 路由

定义员工相关的 API 端点：
- GET    /api/employees?status=&departmentId=   - 过滤列表，最新的在前
- GET    /api/employees/search?q=               - 全文搜索
- POST   /api/employees                         - 创建员工
- GET    /api/employees/{id}                    - 获取员工
- PATCH  /api/employees/{id}                    - 局部更新
- DELETE /api/employees/{id}                    - 删除（工作流保留）

/search 必须声明在 /{employee_id} 之前，否则会被当成 id 匹配。
"""


from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from src.application.services.audit_recorder import AuditRecorder
from src.domain.value_objects.employee_status import EmployeeStatus
from src.infrastructure.database.repositories import SQLAlchemyEmployeeRepository
from src.interfaces.api.dependencies.repositories import (
    get_audit_recorder,
    get_employee_repository,
)
from src.interfaces.api.dto import CreateEmployeeRequest, EmployeeResponse, UpdateEmployeeRequest

router = APIRouter(prefix="/employees", tags=["employees"])


def _label(employee) -> str:
    return f"{employee.first_name} {employee.last_name}"


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    employee_status: EmployeeStatus | None = Query(default=None, alias="status"),
    department_id: str | None = Query(default=None, alias="departmentId"),
    repository: SQLAlchemyEmployeeRepository = Depends(get_employee_repository),
) -> list[EmployeeResponse]:
    employees = await repository.list(
        status=employee_status.value if employee_status else None,
        department_id=department_id,
    )
    return [EmployeeResponse.model_validate(e) for e in employees]


@router.get("/search", response_model=list[EmployeeResponse])
async def search_employees(
    q: str | None = Query(default=None, description="Substring of name, email or job title"),
    repository: SQLAlchemyEmployeeRepository = Depends(get_employee_repository),
) -> list[EmployeeResponse]:
    if not q:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Search query required"
        )
    return [EmployeeResponse.model_validate(e) for e in await repository.search(q)]


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    request: CreateEmployeeRequest,
    repository: SQLAlchemyEmployeeRepository = Depends(get_employee_repository),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> EmployeeResponse:
    employee = await repository.create(request.to_values())
    await audit.created("employee", employee.id, _label(employee))
    return EmployeeResponse.model_validate(employee)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: str,
    repository: SQLAlchemyEmployeeRepository = Depends(get_employee_repository),
) -> EmployeeResponse:
    employee = await repository.get(employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return EmployeeResponse.model_validate(employee)


@router.patch("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: str,
    request: UpdateEmployeeRequest,
    repository: SQLAlchemyEmployeeRepository = Depends(get_employee_repository),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> EmployeeResponse:
    employee = await repository.update(employee_id, request.to_values())
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    await audit.updated("employee", employee.id, _label(employee))
    return EmployeeResponse.model_validate(employee)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_employee(
    employee_id: str,
    repository: SQLAlchemyEmployeeRepository = Depends(get_employee_repository),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> Response:
    await repository.delete(employee_id)
    await audit.deleted("employee", employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

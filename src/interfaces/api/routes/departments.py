"""Departments 路由

定义部门相关的 API 端点：
- GET    /api/departments        - 列出部门（按名称排序）
- POST   /api/departments        - 创建部门
- GET    /api/departments/{id}   - 获取部门
- PATCH  /api/departments/{id}   - 局部更新
- DELETE /api/departments/{id}   - 删除（员工保留原 department_id）
"""


from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.application.services.audit_recorder import AuditRecorder
from src.infrastructure.database.repositories import SQLAlchemyDepartmentRepository
from src.interfaces.api.dependencies.repositories import (
    get_audit_recorder,
    get_department_repository,
)
from src.interfaces.api.dto import (
    CreateDepartmentRequest,
    DepartmentResponse,
    UpdateDepartmentRequest,
)

router = APIRouter(prefix="/departments", tags=["departments"])


@router.get("", response_model=list[DepartmentResponse])
async def list_departments(
    repository: SQLAlchemyDepartmentRepository = Depends(get_department_repository),
) -> list[DepartmentResponse]:
    return [DepartmentResponse.model_validate(d) for d in await repository.list()]


@router.post("", response_model=DepartmentResponse, status_code=status.HTTP_201_CREATED)
async def create_department(
    request: CreateDepartmentRequest,
    repository: SQLAlchemyDepartmentRepository = Depends(get_department_repository),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> DepartmentResponse:
    department = await repository.create(request.to_values())
    await audit.created("department", department.id, department.name)
    return DepartmentResponse.model_validate(department)


@router.get("/{department_id}", response_model=DepartmentResponse)
async def get_department(
    department_id: str,
    repository: SQLAlchemyDepartmentRepository = Depends(get_department_repository),
) -> DepartmentResponse:
    department = await repository.get(department_id)
    if department is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Department not found")
    return DepartmentResponse.model_validate(department)


@router.patch("/{department_id}", response_model=DepartmentResponse)
async def update_department(
    department_id: str,
    request: UpdateDepartmentRequest,
    repository: SQLAlchemyDepartmentRepository = Depends(get_department_repository),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> DepartmentResponse:
    department = await repository.update(department_id, request.to_values())
    if department is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Department not found")
    await audit.updated("department", department.id, department.name)
    return DepartmentResponse.model_validate(department)


@router.delete(
    "/{department_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def delete_department(
    department_id: str,
    repository: SQLAlchemyDepartmentRepository = Depends(get_department_repository),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> Response:
    await repository.delete(department_id)
    await audit.deleted("department", department_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

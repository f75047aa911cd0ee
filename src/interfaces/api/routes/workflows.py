"""Workflows 路由

定义工作流相关的 API 端点：
- GET    /api/workflows?status=&type=&employeeId=&assignedTo=   - 过滤列表
- POST   /api/workflows              - 创建；克隆模板步骤
- GET    /api/workflows/{id}         - 工作流及其步骤和员工
- PATCH  /api/workflows/{id}         - 局部更新
- DELETE /api/workflows/{id}         - 删除（步骤和任务保留）
- GET    /api/workflows/{id}/steps   - 按 stepOrder 列出步骤
- PATCH  /api/workflow-steps/{id}    - 更新步骤并重新计算进度

进度由步骤端点维护；PATCH /workflows/{id} 按传入内容原样写入。
"""


from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from src.application.services.audit_recorder import AuditRecorder
from src.application.use_cases import (
    CreateWorkflowInput,
    CreateWorkflowUseCase,
    UpdateWorkflowStepInput,
    UpdateWorkflowStepUseCase,
)
from src.domain.value_objects.workflow_status import WorkflowStatus
from src.domain.value_objects.workflow_type import WorkflowType
from src.infrastructure.database.repositories import (
    SQLAlchemyEmployeeRepository,
    SQLAlchemyWorkflowRepository,
    SQLAlchemyWorkflowStepRepository,
)
from src.interfaces.api.dependencies.repositories import (
    get_audit_recorder,
    get_create_workflow_use_case,
    get_employee_repository,
    get_update_workflow_step_use_case,
    get_workflow_repository,
    get_workflow_step_repository,
)
from src.interfaces.api.dto import (
    CreateWorkflowRequest,
    UpdateWorkflowRequest,
    UpdateWorkflowStepRequest,
    WorkflowDetailResponse,
    WorkflowResponse,
    WorkflowStepResponse,
)

router = APIRouter(prefix="/workflows", tags=["workflows"])
steps_router = APIRouter(prefix="/workflow-steps", tags=["workflows"])


@router.get("", response_model=list[WorkflowResponse])
async def list_workflows(
    workflow_status: WorkflowStatus | None = Query(default=None, alias="status"),
    workflow_type: WorkflowType | None = Query(default=None, alias="type"),
    employee_id: str | None = Query(default=None, alias="employeeId"),
    assigned_to: str | None = Query(default=None, alias="assignedTo"),
    repository: SQLAlchemyWorkflowRepository = Depends(get_workflow_repository),
) -> list[WorkflowResponse]:
    workflows = await repository.list(
        status=workflow_status.value if workflow_status else None,
        type=workflow_type.value if workflow_type else None,
        employee_id=employee_id,
        assigned_to=assigned_to,
    )
    return [WorkflowResponse.model_validate(w) for w in workflows]


@router.post("", response_model=WorkflowResponse, status_code=status.HTTP_201_CREATED)
async def create_workflow(
    request: CreateWorkflowRequest,
    use_case: CreateWorkflowUseCase = Depends(get_create_workflow_use_case),
) -> WorkflowResponse:
    """从模板创建工作流

    错误：
    - 400: 请求体非法
    - 404: 模板或员工不存在
    - 500: 插入步骤失败（已写入的记录保留）
    """
    workflow = await use_case.execute(CreateWorkflowInput(values=request.to_values()))
    return WorkflowResponse.model_validate(workflow)


@router.get("/{workflow_id}", response_model=WorkflowDetailResponse)
async def get_workflow(
    workflow_id: str,
    repository: SQLAlchemyWorkflowRepository = Depends(get_workflow_repository),
    step_repository: SQLAlchemyWorkflowStepRepository = Depends(get_workflow_step_repository),
    employee_repository: SQLAlchemyEmployeeRepository = Depends(get_employee_repository),
) -> WorkflowDetailResponse:
    workflow = await repository.get(workflow_id)
    if workflow is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workflow not found")

    steps = await step_repository.list_for_workflow(workflow_id)
    employee = await employee_repository.get(workflow.employee_id)
    return WorkflowDetailResponse.from_parts(workflow, steps, employee)


@router.patch("/{workflow_id}", response_model=WorkflowResponse)
async def update_workflow(
    workflow_id: str,
    request: UpdateWorkflowRequest,
    repository: SQLAlchemyWorkflowRepository = Depends(get_workflow_repository),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> WorkflowResponse:
    workflow = await repository.update(workflow_id, request.to_values())
    if workflow is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workflow not found")
    await audit.updated("workflow", workflow.id, workflow.name)
    return WorkflowResponse.model_validate(workflow)


@router.delete("/{workflow_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_workflow(
    workflow_id: str,
    repository: SQLAlchemyWorkflowRepository = Depends(get_workflow_repository),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> Response:
    await repository.delete(workflow_id)
    await audit.deleted("workflow", workflow_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{workflow_id}/steps", response_model=list[WorkflowStepResponse])
async def list_workflow_steps(
    workflow_id: str,
    step_repository: SQLAlchemyWorkflowStepRepository = Depends(get_workflow_step_repository),
) -> list[WorkflowStepResponse]:
    steps = await step_repository.list_for_workflow(workflow_id)
    return [WorkflowStepResponse.model_validate(s) for s in steps]


@steps_router.patch("/{step_id}", response_model=WorkflowStepResponse)
async def update_workflow_step(
    step_id: str,
    request: UpdateWorkflowStepRequest,
    use_case: UpdateWorkflowStepUseCase = Depends(get_update_workflow_step_use_case),
) -> WorkflowStepResponse:
    """更新工作流步骤

    步骤标记为 "completed" 时重新计算父工作流的进度和状态，
    其他状态变化不会改动工作流。

    错误：
    - 404: 步骤不存在
    """
    step = await use_case.execute(
        UpdateWorkflowStepInput(step_id=step_id, values=request.to_values())
    )
    return WorkflowStepResponse.model_validate(step)

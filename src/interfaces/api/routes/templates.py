"""工作流模板路由

定义模板相关的 API 端点：
- GET    /api/templates?type=&status=     - 列出模板，最新的在前
- POST   /api/templates                   - 创建模板（可内嵌步骤）
- GET    /api/templates/{id}              - 获取模板及步骤
- PATCH  /api/templates/{id}              - 更新；传入 "steps" 时整体替换步骤
- DELETE /api/templates/{id}              - 先删步骤，再删模板
- GET    /api/templates/{id}/steps        - 按 stepOrder 列出步骤
- POST   /api/templates/{id}/steps        - 追加一个步骤

设计原则：
1. 路由只负责 HTTP 层的事情
2. 跨表操作交给用例（save_template）
"""


from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from src.application.use_cases import (
    CreateTemplateInput,
    CreateTemplateUseCase,
    DeleteTemplateUseCase,
    UpdateTemplateInput,
    UpdateTemplateUseCase,
)
from src.domain.value_objects.template_status import TemplateStatus
from src.domain.value_objects.workflow_type import WorkflowType
from src.infrastructure.database.repositories import (
    SQLAlchemyTemplateRepository,
    SQLAlchemyTemplateStepRepository,
)
from src.interfaces.api.dependencies.repositories import (
    get_create_template_use_case,
    get_delete_template_use_case,
    get_template_repository,
    get_template_step_repository,
    get_update_template_use_case,
)
from src.interfaces.api.dto import (
    CreateTemplateRequest,
    TemplateDetailResponse,
    TemplateResponse,
    TemplateStepInput,
    TemplateStepResponse,
    UpdateTemplateRequest,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=list[TemplateResponse])
async def list_templates(
    template_type: WorkflowType | None = Query(default=None, alias="type"),
    template_status: TemplateStatus | None = Query(default=None, alias="status"),
    repository: SQLAlchemyTemplateRepository = Depends(get_template_repository),
) -> list[TemplateResponse]:
    templates = await repository.list(
        type=template_type.value if template_type else None,
        status=template_status.value if template_status else None,
    )
    return [TemplateResponse.model_validate(t) for t in templates]


@router.post("", response_model=TemplateDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_template(
    request: CreateTemplateRequest,
    use_case: CreateTemplateUseCase = Depends(get_create_template_use_case),
) -> TemplateDetailResponse:
    result = await use_case.execute(
        CreateTemplateInput(values=request.to_values(), steps=request.step_values())
    )
    return TemplateDetailResponse.from_parts(result.template, result.steps)


@router.get("/{template_id}", response_model=TemplateDetailResponse)
async def get_template(
    template_id: str,
    repository: SQLAlchemyTemplateRepository = Depends(get_template_repository),
    step_repository: SQLAlchemyTemplateStepRepository = Depends(get_template_step_repository),
) -> TemplateDetailResponse:
    template = await repository.get(template_id)
    if template is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")
    steps = await step_repository.list_for_template(template_id)
    return TemplateDetailResponse.from_parts(template, steps)


@router.patch("/{template_id}", response_model=TemplateDetailResponse)
async def update_template(
    template_id: str,
    request: UpdateTemplateRequest,
    use_case: UpdateTemplateUseCase = Depends(get_update_template_use_case),
) -> TemplateDetailResponse:
    """更新模板

    错误：
    - 404: 模板不存在（用例抛出 NotFoundError）
    """
    result = await use_case.execute(
        UpdateTemplateInput(
            template_id=template_id,
            values=request.to_values(),
            steps=request.step_values(),
        )
    )
    return TemplateDetailResponse.from_parts(result.template, result.steps)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_template(
    template_id: str,
    use_case: DeleteTemplateUseCase = Depends(get_delete_template_use_case),
) -> Response:
    await use_case.execute(template_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{template_id}/steps", response_model=list[TemplateStepResponse])
async def list_template_steps(
    template_id: str,
    step_repository: SQLAlchemyTemplateStepRepository = Depends(get_template_step_repository),
) -> list[TemplateStepResponse]:
    steps = await step_repository.list_for_template(template_id)
    return [TemplateStepResponse.model_validate(s) for s in steps]


@router.post(
    "/{template_id}/steps",
    response_model=TemplateStepResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_template_step(
    template_id: str,
    request: TemplateStepInput,
    step_repository: SQLAlchemyTemplateStepRepository = Depends(get_template_step_repository),
) -> TemplateStepResponse:
    step = await step_repository.create({**request.to_values(), "template_id": template_id})
    return TemplateStepResponse.model_validate(step)

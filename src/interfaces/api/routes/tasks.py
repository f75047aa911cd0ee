"""Tasks 路由

定义任务相关的 API 端点：
- GET    /api/tasks?workflowId=&assigneeId=&status=   - 过滤列表
- GET    /api/tasks/pending?userId=                   - 待处理任务，截止时间最早的在前
- POST   /api/tasks                                   - 创建任务
- GET    /api/tasks/{id}                              - 获取任务
- PATCH  /api/tasks/{id}                              - 局部更新
- DELETE /api/tasks/{id}                              - 删除

任务变更不记审计，也不影响工作流进度。
"""


from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from src.domain.value_objects.task_status import TaskStatus
from src.infrastructure.database.repositories import SQLAlchemyTaskRepository
from src.interfaces.api.dependencies.repositories import get_task_repository
from src.interfaces.api.dto import CreateTaskRequest, TaskResponse, UpdateTaskRequest

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    workflow_id: str | None = Query(default=None, alias="workflowId"),
    assignee_id: str | None = Query(default=None, alias="assigneeId"),
    task_status: TaskStatus | None = Query(default=None, alias="status"),
    repository: SQLAlchemyTaskRepository = Depends(get_task_repository),
) -> list[TaskResponse]:
    tasks = await repository.list(
        workflow_id=workflow_id,
        assignee_id=assignee_id,
        status=task_status.value if task_status else None,
    )
    return [TaskResponse.model_validate(t) for t in tasks]


@router.get("/pending", response_model=list[TaskResponse])
async def list_pending_tasks(
    user_id: str | None = Query(default=None, alias="userId"),
    repository: SQLAlchemyTaskRepository = Depends(get_task_repository),
) -> list[TaskResponse]:
    return [TaskResponse.model_validate(t) for t in await repository.list_pending(user_id)]


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    request: CreateTaskRequest,
    repository: SQLAlchemyTaskRepository = Depends(get_task_repository),
) -> TaskResponse:
    return TaskResponse.model_validate(await repository.create(request.to_values()))


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    repository: SQLAlchemyTaskRepository = Depends(get_task_repository),
) -> TaskResponse:
    task = await repository.get(task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return TaskResponse.model_validate(task)


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    repository: SQLAlchemyTaskRepository = Depends(get_task_repository),
) -> TaskResponse:
    task = await repository.update(task_id, request.to_values())
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return TaskResponse.model_validate(task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_task(
    task_id: str,
    repository: SQLAlchemyTaskRepository = Depends(get_task_repository),
) -> Response:
    await repository.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

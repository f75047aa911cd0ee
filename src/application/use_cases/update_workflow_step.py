"""UpdateWorkflowStepUseCase - 更新工作流步骤并聚合进度

流程：
1. 状态变为 in_progress / completed 且调用方没有传时间戳时，
   补上 started_at / completed_at
2. 写入步骤
3. 新状态为 "completed" 时，重新加载父工作流的全部步骤并写回
   重新计算的进度（见 src.domain.services.workflow_progress）

其他状态变化不会触碰工作流。
"""


import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from src.domain.exceptions import NotFoundError
from src.domain.ports.workflow_repository import (
    WorkflowRepository,
    WorkflowStepRecord,
    WorkflowStepRepository,
)
from src.domain.services.workflow_progress import plan_progress_update, triggers_aggregation
from src.domain.value_objects.step_status import StepStatus

logger = logging.getLogger(__name__)


@dataclass
class UpdateWorkflowStepInput:
    step_id: str
    values: dict[str, Any]


class UpdateWorkflowStepUseCase:
    def __init__(
        self,
        workflow_step_repository: WorkflowStepRepository,
        workflow_repository: WorkflowRepository,
    ):
        self.workflow_step_repository = workflow_step_repository
        self.workflow_repository = workflow_repository

    async def execute(
        self, input_data: UpdateWorkflowStepInput, now: datetime | None = None
    ) -> WorkflowStepRecord:
        """更新步骤；步骤完成时执行进度聚合

        异常：
            NotFoundError: 步骤不存在
        """
        now = now or datetime.now(UTC)
        values = dict(input_data.values)
        new_status = values.get("status")

        current = await self.workflow_step_repository.get(input_data.step_id)
        if current is None:
            raise NotFoundError("Workflow step", input_data.step_id)

        if new_status == StepStatus.IN_PROGRESS.value and current.started_at is None:
            values.setdefault("started_at", now)
        if new_status == StepStatus.COMPLETED.value:
            values.setdefault("completed_at", now)

        step = await self.workflow_step_repository.update(input_data.step_id, values)
        if step is None:
            raise NotFoundError("Workflow step", input_data.step_id)

        if triggers_aggregation(new_status) and step.workflow_id:
            await self._aggregate(step.workflow_id, now)

        return step

    async def _aggregate(self, workflow_id: str, now: datetime) -> None:
        steps = await self.workflow_step_repository.list_for_workflow(workflow_id)
        update = plan_progress_update((s.status for s in steps), now=now)
        if update is None:
            return

        await self.workflow_repository.update(workflow_id, update.to_values())
        logger.info(
            "工作流 %s 进度已重新计算: %d%% (共 %d 个步骤)",
            workflow_id,
            update.progress,
            len(steps),
        )

"""CreateWorkflowUseCase - 为员工启动一个 JML 工作流

业务场景：
HR 选择模板（joiner / mover / leaver）和员工，系统创建工作流，
并把模板当前的步骤复制进去。

职责：
1. 校验引用的模板和员工存在
2. 插入工作流
3. 按 step_order 把每个模板步骤克隆为 pending 状态的工作流步骤
4. 追加审计记录

每次插入单独提交。克隆中途失败时，工作流和已插入的步骤保留在
数据库中，异常继续向上抛出。
"""


import logging
from dataclasses import dataclass
from typing import Any

from src.application.services.audit_recorder import AuditRecorder
from src.domain.exceptions import NotFoundError
from src.domain.ports.crud_repository import CrudRepository, EntityRecord
from src.domain.ports.template_repository import TemplateRepository, TemplateStepRepository
from src.domain.ports.workflow_repository import (
    WorkflowRecord,
    WorkflowRepository,
    WorkflowStepRepository,
)
from src.domain.value_objects.step_status import StepStatus

logger = logging.getLogger(__name__)


@dataclass
class CreateWorkflowInput:
    """校验后的工作流列值（键为 snake_case 的 ORM 属性名）

    values 必须包含 template_id 和 employee_id。
    """

    values: dict[str, Any]


class CreateWorkflowUseCase:
    """创建工作流并克隆模板步骤

    依赖（构造函数注入）：
    - workflow_repository / workflow_step_repository
    - template_repository / template_step_repository
    - employee_repository: 只用于存在性校验
    - audit_recorder
    """

    def __init__(
        self,
        workflow_repository: WorkflowRepository,
        workflow_step_repository: WorkflowStepRepository,
        template_repository: TemplateRepository,
        template_step_repository: TemplateStepRepository,
        employee_repository: CrudRepository[EntityRecord],
        audit_recorder: AuditRecorder,
    ):
        self.workflow_repository = workflow_repository
        self.workflow_step_repository = workflow_step_repository
        self.template_repository = template_repository
        self.template_step_repository = template_step_repository
        self.employee_repository = employee_repository
        self.audit_recorder = audit_recorder

    async def execute(self, input_data: CreateWorkflowInput) -> WorkflowRecord:
        """执行用例

        异常：
            NotFoundError: 模板或员工不存在（此时不写入任何数据）
        """
        values = dict(input_data.values)
        template_id = values["template_id"]
        employee_id = values["employee_id"]

        if await self.template_repository.get(template_id) is None:
            raise NotFoundError("Template", template_id)
        if await self.employee_repository.get(employee_id) is None:
            raise NotFoundError("Employee", employee_id)

        workflow = await self.workflow_repository.create(values)

        template_steps = await self.template_step_repository.list_for_template(template_id)
        for template_step in template_steps:
            await self.workflow_step_repository.create(
                {
                    "workflow_id": workflow.id,
                    "template_step_id": template_step.id,
                    "name": template_step.name,
                    "description": template_step.description,
                    "step_order": template_step.step_order,
                    "status": StepStatus.PENDING.value,
                    "assignee_id": template_step.assignee_id,
                }
            )

        logger.info(
            "已从模板 %s 创建工作流 %s，共 %d 个步骤",
            template_id,
            workflow.id,
            len(template_steps),
        )
        await self.audit_recorder.created("workflow", workflow.id, workflow.name)
        return workflow

"""CreateWorkflowUseCase 单元测试

测试策略：所有 Repository 用 AsyncMock，记录用 SimpleNamespace。
"""


from types import SimpleNamespace
from unittest.mock import AsyncMock, call

import pytest

from src.application.use_cases.create_workflow import CreateWorkflowInput, CreateWorkflowUseCase
from src.domain.exceptions import NotFoundError


@pytest.fixture
def repositories():
    return SimpleNamespace(
        workflow=AsyncMock(),
        workflow_step=AsyncMock(),
        template=AsyncMock(),
        template_step=AsyncMock(),
        employee=AsyncMock(),
        audit=AsyncMock(),
    )


@pytest.fixture
def use_case(repositories) -> CreateWorkflowUseCase:
    return CreateWorkflowUseCase(
        workflow_repository=repositories.workflow,
        workflow_step_repository=repositories.workflow_step,
        template_repository=repositories.template,
        template_step_repository=repositories.template_step,
        employee_repository=repositories.employee,
        audit_recorder=repositories.audit,
    )


def _input() -> CreateWorkflowInput:
    return CreateWorkflowInput(
        values={
            "template_id": "tpl-1",
            "employee_id": "emp-1",
            "name": "Onboarding: John Doe",
            "type": "joiner",
            "initiated_by": "user-1",
        }
    )


class TestCreateWorkflowUseCase:
    @pytest.mark.asyncio
    async def test_clones_template_steps_in_order_as_pending(self, use_case, repositories):
        # Arrange
        repositories.template.get.return_value = SimpleNamespace(id="tpl-1")
        repositories.employee.get.return_value = SimpleNamespace(id="emp-1")
        repositories.workflow.create.return_value = SimpleNamespace(
            id="wf-1", name="Onboarding: John Doe"
        )
        repositories.template_step.list_for_template.return_value = [
            SimpleNamespace(
                id="ts-a", name="A", description="first", step_order=1, assignee_id=None
            ),
            SimpleNamespace(id="ts-b", name="B", description=None, step_order=2, assignee_id="u-9"),
        ]

        # Act
        workflow = await use_case.execute(_input())

        # Assert
        assert workflow.id == "wf-1"
        repositories.template_step.list_for_template.assert_awaited_once_with("tpl-1")
        assert repositories.workflow_step.create.await_args_list == [
            call(
                {
                    "workflow_id": "wf-1",
                    "template_step_id": "ts-a",
                    "name": "A",
                    "description": "first",
                    "step_order": 1,
                    "status": "pending",
                    "assignee_id": None,
                }
            ),
            call(
                {
                    "workflow_id": "wf-1",
                    "template_step_id": "ts-b",
                    "name": "B",
                    "description": None,
                    "step_order": 2,
                    "status": "pending",
                    "assignee_id": "u-9",
                }
            ),
        ]
        repositories.audit.created.assert_awaited_once_with(
            "workflow", "wf-1", "Onboarding: John Doe"
        )

    @pytest.mark.asyncio
    async def test_missing_template_raises_before_any_write(self, use_case, repositories):
        repositories.template.get.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(_input())

        assert exc_info.value.entity_type == "Template"
        repositories.workflow.create.assert_not_awaited()
        repositories.audit.created.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_employee_raises_before_any_write(self, use_case, repositories):
        repositories.template.get.return_value = SimpleNamespace(id="tpl-1")
        repositories.employee.get.return_value = None

        with pytest.raises(NotFoundError, match="Employee not found: emp-1"):
            await use_case.execute(_input())

        repositories.workflow.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_step_failure_propagates_and_keeps_partial_workflow(
        self, use_case, repositories
    ):
        repositories.template.get.return_value = SimpleNamespace(id="tpl-1")
        repositories.employee.get.return_value = SimpleNamespace(id="emp-1")
        repositories.workflow.create.return_value = SimpleNamespace(id="wf-1", name="x")
        repositories.template_step.list_for_template.return_value = [
            SimpleNamespace(id="ts-a", name="A", description=None, step_order=1, assignee_id=None),
            SimpleNamespace(id="ts-b", name="B", description=None, step_order=2, assignee_id=None),
        ]
        repositories.workflow_step.create.side_effect = [
            SimpleNamespace(id="s1"),
            RuntimeError("db"),
        ]

        with pytest.raises(RuntimeError):
            await use_case.execute(_input())

        # 没有回滚：工作流已写入，且不会被删除
        repositories.workflow.create.assert_awaited_once()
        repositories.workflow.delete.assert_not_awaited()
        repositories.audit.created.assert_not_awaited()

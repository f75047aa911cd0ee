"""UpdateWorkflowStepUseCase 单元测试

验证步骤写入、时间戳补全，以及进度聚合何时写回父工作流。
"""


from datetime import UTC, datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from src.application.use_cases.update_workflow_step import (
    UpdateWorkflowStepInput,
    UpdateWorkflowStepUseCase,
)
from src.domain.exceptions import NotFoundError

NOW = datetime(2024, 6, 1, 9, 30, tzinfo=UTC)


def _step(status: str, step_id: str = "step-1", started_at=None) -> SimpleNamespace:
    return SimpleNamespace(
        id=step_id, workflow_id="wf-1", status=status, started_at=started_at, completed_at=None
    )


@pytest.fixture
def step_repository() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def workflow_repository() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def use_case(step_repository, workflow_repository) -> UpdateWorkflowStepUseCase:
    return UpdateWorkflowStepUseCase(
        workflow_step_repository=step_repository,
        workflow_repository=workflow_repository,
    )


class TestUpdateWorkflowStepUseCase:
    @pytest.mark.asyncio
    async def test_completing_a_step_recalculates_progress(
        self, use_case, step_repository, workflow_repository
    ):
        # Arrange: 4 个步骤，这是第一个完成的
        step_repository.get.return_value = _step("pending")
        step_repository.update.return_value = _step("completed")
        step_repository.list_for_workflow.return_value = [
            _step("completed"),
            _step("pending", "s2"),
            _step("pending", "s3"),
            _step("pending", "s4"),
        ]

        # Act
        await use_case.execute(
            UpdateWorkflowStepInput(step_id="step-1", values={"status": "completed"}), now=NOW
        )

        # Assert
        step_repository.update.assert_awaited_once_with(
            "step-1", {"status": "completed", "completed_at": NOW}
        )
        workflow_repository.update.assert_awaited_once_with(
            "wf-1", {"progress": 25, "status": "in_progress"}
        )

    @pytest.mark.asyncio
    async def test_completing_last_step_completes_workflow(
        self, use_case, step_repository, workflow_repository
    ):
        step_repository.get.return_value = _step("in_progress", started_at=NOW)
        step_repository.update.return_value = _step("completed")
        step_repository.list_for_workflow.return_value = [_step("completed"), _step("completed")]

        await use_case.execute(
            UpdateWorkflowStepInput(step_id="step-1", values={"status": "completed"}), now=NOW
        )

        workflow_repository.update.assert_awaited_once_with(
            "wf-1", {"progress": 100, "status": "completed", "completed_at": NOW}
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["blocked", "skipped", "pending"])
    async def test_other_transitions_leave_workflow_untouched(
        self, use_case, step_repository, workflow_repository, status
    ):
        step_repository.get.return_value = _step("in_progress", started_at=NOW)
        step_repository.update.return_value = _step(status)

        await use_case.execute(UpdateWorkflowStepInput(step_id="step-1", values={"status": status}))

        step_repository.list_for_workflow.assert_not_awaited()
        workflow_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_moving_to_in_progress_stamps_started_at_once(self, use_case, step_repository):
        step_repository.get.return_value = _step("pending")
        step_repository.update.return_value = _step("in_progress", started_at=NOW)

        await use_case.execute(
            UpdateWorkflowStepInput(step_id="step-1", values={"status": "in_progress"}), now=NOW
        )

        step_repository.update.assert_awaited_once_with(
            "step-1", {"status": "in_progress", "started_at": NOW}
        )

    @pytest.mark.asyncio
    async def test_existing_started_at_is_not_overwritten(self, use_case, step_repository):
        earlier = datetime(2024, 5, 1, tzinfo=UTC)
        step_repository.get.return_value = _step("blocked", started_at=earlier)
        step_repository.update.return_value = _step("in_progress", started_at=earlier)

        await use_case.execute(
            UpdateWorkflowStepInput(step_id="step-1", values={"status": "in_progress"}), now=NOW
        )

        step_repository.update.assert_awaited_once_with("step-1", {"status": "in_progress"})

    @pytest.mark.asyncio
    async def test_supplied_completed_at_is_kept(self, use_case, step_repository):
        supplied = datetime(2024, 5, 20, tzinfo=UTC)
        step_repository.get.return_value = _step("pending")
        step_repository.update.return_value = _step("completed")
        step_repository.list_for_workflow.return_value = [_step("completed")]

        await use_case.execute(
            UpdateWorkflowStepInput(
                step_id="step-1", values={"status": "completed", "completed_at": supplied}
            ),
            now=NOW,
        )

        step_repository.update.assert_awaited_once_with(
            "step-1", {"status": "completed", "completed_at": supplied}
        )

    @pytest.mark.asyncio
    async def test_workflow_without_steps_is_not_updated(
        self, use_case, step_repository, workflow_repository
    ):
        step_repository.get.return_value = _step("pending")
        step_repository.update.return_value = _step("completed")
        step_repository.list_for_workflow.return_value = []

        await use_case.execute(
            UpdateWorkflowStepInput(step_id="step-1", values={"status": "completed"})
        )

        workflow_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_step_raises_not_found(self, use_case, step_repository):
        step_repository.get.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateWorkflowStepInput(step_id="missing", values={"notes": "x"})
            )

        step_repository.update.assert_not_awaited()

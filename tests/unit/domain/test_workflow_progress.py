"""工作流进度聚合单元测试

覆盖：
1. 完成百分比的整数四舍五入
2. 根据百分比决定的状态变化
3. 哪些步骤状态变化会触发重新计算
"""


from datetime import UTC, datetime

import pytest

from src.domain.services.workflow_progress import (
    ProgressUpdate,
    calculate_progress,
    plan_progress_update,
    triggers_aggregation,
)
from src.domain.value_objects.workflow_status import WorkflowStatus


class TestCalculateProgress:
    @pytest.mark.parametrize(
        ("statuses", "expected"),
        [
            (["completed", "pending", "pending", "pending"], 25),
            (["completed", "completed", "pending"], 67),
            (["completed", "pending", "pending"], 33),
            (["completed"] + ["pending"] * 7, 13),  # 12.5 rounds up
            (["completed", "pending"], 50),
            (["completed", "completed"], 100),
            (["pending", "blocked", "skipped"], 0),
        ],
    )
    def test_rounds_half_up(self, statuses, expected):
        assert calculate_progress(statuses) == expected

    def test_no_steps_returns_none(self):
        assert calculate_progress([]) is None

    def test_only_completed_counts(self):
        # skipped 和 in_progress 的步骤不算完成
        assert calculate_progress(["completed", "skipped", "in_progress", "completed"]) == 50

    @pytest.mark.parametrize("total", [1, 2, 3, 4, 6, 7, 9, 11])
    def test_completing_one_more_step_matches_rounded_ratio(self, total):
        for completed in range(total + 1):
            statuses = ["completed"] * completed + ["pending"] * (total - completed)
            assert calculate_progress(statuses) == int(100 * completed / total + 0.5)


class TestTriggersAggregation:
    def test_completed_triggers(self):
        assert triggers_aggregation("completed") is True

    @pytest.mark.parametrize("status", ["pending", "in_progress", "blocked", "skipped", None])
    def test_other_statuses_do_not_trigger(self, status):
        assert triggers_aggregation(status) is False


class TestPlanProgressUpdate:
    def test_all_completed_marks_workflow_completed(self):
        now = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)

        update = plan_progress_update(["completed", "completed"], now=now)

        assert update == ProgressUpdate(
            progress=100, status=WorkflowStatus.COMPLETED, completed_at=now
        )
        assert update.to_values() == {
            "progress": 100,
            "status": "completed",
            "completed_at": now,
        }

    def test_partial_progress_marks_in_progress(self):
        update = plan_progress_update(["completed", "pending", "pending", "pending"])

        assert update is not None
        assert update.progress == 25
        assert update.status is WorkflowStatus.IN_PROGRESS
        assert update.to_values() == {"progress": 25, "status": "in_progress"}

    def test_zero_progress_leaves_status_untouched(self):
        update = plan_progress_update(["pending", "skipped"])

        assert update is not None
        assert update.to_values() == {"progress": 0}

    def test_no_steps_skips_update(self):
        assert plan_progress_update([]) is None

    def test_completion_timestamp_defaults_to_now(self):
        update = plan_progress_update(["completed"])

        assert update is not None
        assert update.completed_at is not None
        assert update.completed_at.tzinfo is not None

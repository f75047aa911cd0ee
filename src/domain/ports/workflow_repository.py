"""Workflow 端口 - 工作流及其步骤的持久化契约"""

from datetime import datetime
from typing import Protocol

from src.domain.ports.crud_repository import CrudRepository


class WorkflowRecord(Protocol):
    id: str
    template_id: str
    employee_id: str
    name: str
    status: str
    progress: int
    completed_at: datetime | None


class WorkflowStepRecord(Protocol):
    id: str
    workflow_id: str
    name: str
    step_order: int
    status: str
    started_at: datetime | None
    completed_at: datetime | None


class WorkflowRepository(CrudRepository[WorkflowRecord], Protocol):
    pass


class WorkflowStepRepository(CrudRepository[WorkflowStepRecord], Protocol):
    async def list_for_workflow(self, workflow_id: str) -> list[WorkflowStepRecord]:
        """工作流的全部步骤，按 step_order 升序"""
        ...
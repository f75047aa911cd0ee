"""Application 用例 - 编排 Repository 与领域规则

用例只覆盖跨多张表的操作：
- CreateWorkflowUseCase: 工作流 + 克隆步骤 + 审计
- UpdateWorkflowStepUseCase: 更新步骤 + 进度聚合
- Create/Update/DeleteTemplateUseCase: 模板 + 步骤集合 + 审计
- SeedDemoDataUseCase: 演示数据

单表 CRUD 由路由直接调用 Repository。
用例依赖 src.domain.ports 中的 Protocol，单元测试用 AsyncMock 替代 Repository。
"""


from src.application.use_cases.create_workflow import CreateWorkflowInput, CreateWorkflowUseCase
from src.application.use_cases.save_template import (
    CreateTemplateInput,
    CreateTemplateUseCase,
    DeleteTemplateUseCase,
    TemplateWithSteps,
    UpdateTemplateInput,
    UpdateTemplateUseCase,
)
from src.application.use_cases.seed_demo_data import SeedDemoDataOutput, SeedDemoDataUseCase
from src.application.use_cases.update_workflow_step import (
    UpdateWorkflowStepInput,
    UpdateWorkflowStepUseCase,
)

__all__ = [
    "CreateTemplateInput",
    "CreateTemplateUseCase",
    "CreateWorkflowInput",
    "CreateWorkflowUseCase",
    "DeleteTemplateUseCase",
    "SeedDemoDataOutput",
    "SeedDemoDataUseCase",
    "TemplateWithSteps",
    "UpdateTemplateInput",
    "UpdateTemplateUseCase",
    "UpdateWorkflowStepInput",
    "UpdateWorkflowStepUseCase",
]

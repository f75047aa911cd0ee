"""Seed 路由

- POST /api/seed - 写入演示数据

调用两次会再插入一份数据；第二次在用户邮箱唯一约束上失败，
失败之前写入的记录保留。
"""


from fastapi import APIRouter, Depends

from src.application.use_cases import SeedDemoDataUseCase
from src.interfaces.api.dependencies.repositories import get_seed_demo_data_use_case
from src.interfaces.api.dto import SeedResponse

router = APIRouter(prefix="/seed", tags=["seed"])


@router.post("", response_model=SeedResponse)
async def seed_demo_data(
    use_case: SeedDemoDataUseCase = Depends(get_seed_demo_data_use_case),
) -> SeedResponse:
    output = await use_case.execute()
    return SeedResponse(message="Seed data created successfully", data=output.to_dict())

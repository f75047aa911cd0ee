"""Pytest 配置 - 全局 fixtures"""

import pytest

from src.config import settings


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch):
    """使用最低的 bcrypt 计算成本，避免哈希拖慢测试"""
    monkeypatch.setattr(settings, "bcrypt_rounds", 4)

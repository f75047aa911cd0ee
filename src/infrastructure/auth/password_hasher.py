"""密码哈希服务

职责：
1. 密码写入数据库前用 bcrypt 哈希
2. 校验明文密码与已存储的哈希是否匹配

计算成本来自 settings.bcrypt_rounds。
"""


import bcrypt

from src.config import settings


class PasswordHasher:
    """bcrypt 密码哈希（无状态工具类）"""

    @staticmethod
    def hash_password(password: str, rounds: int | None = None) -> str:
        """哈希明文密码

        参数：
            password: 明文密码
            rounds: bcrypt 计算成本，默认为 settings.bcrypt_rounds

        返回：
            str: bcrypt 哈希（"$2b$..."），可直接存储

        示例：
            >>> hashed = PasswordHasher.hash_password("admin123")
            >>> PasswordHasher.verify_password("admin123", hashed)
            True
        """
        salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def verify_password(password: str, hashed: str) -> bool:
        """校验明文密码与已存储的 bcrypt 哈希

        哈希格式非法时返回 False，不抛异常。
        """
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            return False

"""PasswordHasher 单元测试"""

from src.infrastructure.auth.password_hasher import PasswordHasher


class TestPasswordHasher:
    def test_hash_is_not_the_plain_password(self):
        hashed = PasswordHasher.hash_password("admin123")

        assert hashed != "admin123"
        assert hashed.startswith("$2")

    def test_verify_round_trip(self):
        hashed = PasswordHasher.hash_password("hr123", rounds=4)

        assert PasswordHasher.verify_password("hr123", hashed) is True
        assert PasswordHasher.verify_password("wrong", hashed) is False

    def test_same_password_gets_distinct_salts(self):
        assert PasswordHasher.hash_password("secret") != PasswordHasher.hash_password("secret")

    def test_malformed_hash_verifies_false(self):
        assert PasswordHasher.verify_password("secret", "not-a-bcrypt-hash") is False

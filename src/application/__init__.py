"""Application 层 - 用例编排

职责：
1. 协调 Repository 和领域服务，完成多步操作
2. 对需要审计的变更追加审计记录
3. 把不存在的引用转换为领域异常

这里不导入 FastAPI；具体 Repository 由 API 层注入。
"""

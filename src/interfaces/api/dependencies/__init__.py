"""依赖注入辅助"""

"""
Business Layer - 业务模块层

期权游戏的业务逻辑层，包含：
- tournament: 锦标赛计分与排名
- config: 配置管理
- cli: 命令行工具
"""

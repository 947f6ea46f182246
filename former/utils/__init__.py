"""工具模块.

包含 Former 使用的无状态工具函数.

主要工具:
- html_utils: HTML 属性渲染、class 追加与实体编解码
- translation: 翻译目录与多级回退翻译
- query_utils: 查询结果到下拉 options 的转换
- structlog_config: 结构化日志配置
"""

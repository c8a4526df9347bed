"""查询处理器"""

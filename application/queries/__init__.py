"""查询（读操作）"""

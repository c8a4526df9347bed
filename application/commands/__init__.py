"""命令（写操作）"""

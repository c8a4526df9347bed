"""OTP 应用服务"""

"""OTP 基础设施：凭证存储与邮件投递实现"""

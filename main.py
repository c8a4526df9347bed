"""
OTP Service - 邮箱验证码服务 API 入口

运行：
    uv run python main.py

或使用 uvicorn：
    uv run uvicorn main:app --host 0.0.0.0 --port 5000 --reload

API 文档：
    http://localhost:5000/docs
"""

import uvicorn

from infrastructure.config.settings import get_settings
from interfaces.api import create_app


settings = get_settings()

# 导出 FastAPI app (用于 uvicorn)
app = create_app(settings)


if __name__ == "__main__":
    print("=" * 50)
    print(f"启动 {settings.app_name} (provider={settings.email_provider_name})")
    print("=" * 50)
    print()
    print("API 端点:")
    print("  POST /send-otp      - 签发验证码")
    print("  POST /verify-otp    - 校验验证码")
    if settings.debug_endpoint_enabled:
        print("  GET  /__debug/otps  - 查看待验证验证码（调试）")
    print()
    print(f"文档: http://localhost:{settings.port}/docs")
    print("=" * 50)

    uvicorn.run(app, host="0.0.0.0", port=settings.port)

import time
import json
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp


logger = logging.getLogger(__name__)


class LogMiddleware(BaseHTTPMiddleware):
    """记录每个请求的方法、路径、状态码、业务返回码与耗时"""

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next):

        #请求前
        start_time = time.time()

        #执行业务逻辑拿到对应的响应
        response = await call_next(request)

        #请求耗时
        process_time = int((time.time() - start_time) * 1000)

        # 读取响应 body（需要处理 Streaming 的 response）
        response_body = b""
        async for chunk in response.body_iterator:
            response_body += chunk
        # 设置异步响应体
        async def reset_body():
            yield response_body

        response.body_iterator = reset_body()

        # 尝试解析 JSON 获取 code 字段
        response_code = None
        try:
            body_data = json.loads(response_body)
            if isinstance(body_data, dict):
                response_code = body_data.get("code")
        except ValueError:
            pass  # 忽略非 JSON 响应

        client_ip = request.client.host if request.client else None
        logger.info(
            f"{client_ip} {request.method} {request.url.path} "
            f"status={response.status_code} code={response_code} duration_ms={process_time}"
        )

        return response

"""
DocuExtract 客户端异常
"""

from typing import Any, Optional


class DocuExtractError(Exception):
    """DocuExtract 客户端错误基类"""
    pass


class InvalidDocumentError(DocuExtractError, TypeError):
    """文档参数既不是文件路径也不是字节数据"""
    pass


class GatewayConnectionError(DocuExtractError):
    """连接失败或请求超时"""
    pass


class InvalidResponseError(DocuExtractError):
    """成功响应的内容不是合法 JSON"""
    pass


class GatewayHTTPError(DocuExtractError):
    """Gateway 返回非 2xx 状态码"""

    def __init__(self, status_code: int, body: Any = None, text: str = "", url: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        self.text = text
        self.url = url
        super().__init__(f"Gateway returned HTTP {status_code}: {text or body}")

    @classmethod
    def from_response(cls, response) -> "GatewayHTTPError":
        """从 requests.Response 构造异常，尽量保留解析后的响应体"""
        text = response.text or ""
        try:
            body = response.json()
        except ValueError:
            body = text
        return cls(response.status_code, body=body, text=text, url=response.url)

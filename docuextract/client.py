"""
DocuExtract Gateway Python客户端
封装文档上传提取及元数据查询接口
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote

import requests

from .config import ClientConfig, DEFAULT_BASE_URL, DEFAULT_CLIENT_ID
from .exceptions import (
    GatewayConnectionError,
    GatewayHTTPError,
    InvalidDocumentError,
    InvalidResponseError,
)
from .models import DocumentType, ProviderName, enum_value, get_mime_type

logger = logging.getLogger(__name__)

# 大文档在服务端处理较慢
REQUEST_TIMEOUT = 120

DEFAULT_BUFFER_FILE_NAME = "document.pdf"

DocumentSource = Union[str, os.PathLike, bytes, bytearray, memoryview]
DocumentTypeArg = Optional[Union[str, DocumentType]]
ProviderArg = Optional[Union[str, ProviderName]]


class DocuExtractClient:
    """
    DocuExtract Gateway 客户端

    示例:
        with DocuExtractClient(base_url="http://localhost:3000", api_key="key") as client:
            result = client.extract("invoice.pdf", document_type=DocumentType.INVOICE)
            print(result["extraction"]["text"])
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        client_id: Optional[str] = None,
    ):
        """
        初始化客户端，不发起任何网络请求

        Args:
            config: 配置对象，为 None 时使用默认配置
            base_url: Gateway 地址，覆盖 config
            api_key: Bearer Token，覆盖 config
            client_id: 用量统计标识，覆盖 config
        """
        config = config or ClientConfig()
        self._config = ClientConfig(
            base_url=base_url or config.base_url,
            api_key=api_key if api_key is not None else config.api_key,
            client_id=client_id if client_id is not None else config.client_id,
        )
        self._session: Optional[requests.Session] = None

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def api_key(self) -> Optional[str]:
        return self._config.api_key

    @property
    def client_id(self) -> str:
        return self._config.client_id

    @property
    def session(self) -> requests.Session:
        """获取 HTTP 会话（延迟创建）"""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"Accept": "application/json"})
            if self._config.api_key:
                self._session.headers["Authorization"] = f"Bearer {self._config.api_key}"
        return self._session

    def set_client_id(self, client_id: str):
        """设置后续请求使用的 client_id"""
        self._config = self._config.with_client_id(client_id)

    def _url(self, path: str) -> str:
        return f"{self._config.base_url}{path}"

    def _http_error(self, method: str, url: str, response) -> GatewayHTTPError:
        error = GatewayHTTPError.from_response(response)
        logger.error(f"DocuExtract API error: {method} {url} -> {error.status_code} {error.text}")
        return error

    def _request(self, method: str, path: str, **kwargs) -> Any:
        """
        发送请求并解析 JSON 响应

        Raises:
            GatewayHTTPError: 非 2xx 响应
            GatewayConnectionError: 连接失败或超时
            InvalidResponseError: 响应不是 JSON
        """
        url = self._url(path)
        logger.debug(f"DocuExtract {method} {url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                timeout=REQUEST_TIMEOUT,
                **kwargs,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise self._http_error(method, url, e.response) from e
        except requests.exceptions.Timeout as e:
            logger.error(f"DocuExtract request timed out after {REQUEST_TIMEOUT}s: {method} {url}")
            raise GatewayConnectionError(f"Request to {url} timed out after {REQUEST_TIMEOUT}s") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"DocuExtract connection error: {method} {url}: {e}")
            raise GatewayConnectionError(f"Failed to reach {url}: {e}") from e

        # raise_for_status 不处理 1xx/3xx
        if not 200 <= response.status_code < 300:
            raise self._http_error(method, url, response)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"DocuExtract returned non-JSON response: {method} {url}")
            raise InvalidResponseError(f"Invalid JSON response from {url}") from e

    def _form_fields(self, document_type: DocumentTypeArg, force_provider: ProviderArg) -> Dict[str, str]:
        data = {}
        if document_type:
            data["documentType"] = enum_value(document_type)
        if force_provider:
            data["forceProvider"] = enum_value(force_provider)
        data["clientId"] = self._config.client_id
        return data

    def _post_document(self, document_part: tuple, data: Dict[str, str]) -> Dict[str, Any]:
        result = self._request(
            "POST",
            "/api/extract",
            files={"document": document_part},
            data=data,
        )
        logger.info(
            "Extracted %s via DocuExtract (documentType=%s, clientId=%s)",
            document_part[0],
            data.get("documentType", "auto"),
            data["clientId"],
        )
        return result

    def extract(
        self,
        document: DocumentSource,
        document_type: DocumentTypeArg = None,
        force_provider: ProviderArg = None,
        file_name: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        提取文档内容

        Args:
            document: 文件路径或字节数据
            document_type: 文档类型
            force_provider: 强制指定提供方
            file_name: 仅在 document 为字节数据时使用，默认 document.pdf

        Returns:
            Gateway 返回的提取结果（原样返回）

        Raises:
            FileNotFoundError: 文件不存在
            InvalidDocumentError: document 类型不支持
        """
        data = self._form_fields(document_type, force_provider)

        if isinstance(document, (str, os.PathLike)):
            path = Path(document)
            if not path.is_file():
                raise FileNotFoundError(f"File not found: {document}")
            mime_type = get_mime_type(path.suffix)
            with open(path, "rb") as fh:
                return self._post_document((path.name, fh, mime_type), data)

        if isinstance(document, (bytes, bytearray, memoryview)):
            return self._post_document((file_name or DEFAULT_BUFFER_FILE_NAME, bytes(document)), data)

        raise InvalidDocumentError(
            f"Document must be a file path or bytes, got {type(document).__name__}"
        )

    def extract_buffer(
        self,
        buffer: Union[bytes, bytearray, memoryview],
        file_name: str,
        mime_type: str,
        document_type: DocumentTypeArg = None,
        force_provider: ProviderArg = None,
    ) -> Dict[str, Any]:
        """
        提取内存中的文档，文件名和 MIME 类型由调用方指定，不访问文件系统
        """
        if not isinstance(buffer, (bytes, bytearray, memoryview)):
            raise InvalidDocumentError(f"Buffer must be bytes, got {type(buffer).__name__}")

        data = self._form_fields(document_type, force_provider)
        return self._post_document((file_name, bytes(buffer), mime_type), data)

    def get_providers(self) -> List[Dict[str, Any]]:
        """获取提供方列表"""
        data = self._request("GET", "/api/providers")
        return data.get("providers", [])

    def get_pricing(self) -> Dict[str, Any]:
        """获取价格阶梯及折扣后的价格"""
        return self._request("GET", "/api/pricing")

    def health_check(self) -> Dict[str, Any]:
        """获取所有提供方的健康状态"""
        return self._request("GET", "/api/health")

    def get_usage(self) -> Dict[str, Any]:
        """获取当前 client_id 的用量统计"""
        return self._request("GET", f"/api/usage/{quote(self._config.client_id, safe='')}")

    def get_routing(self, document_type: Union[str, DocumentType]) -> Dict[str, Any]:
        """获取指定文档类型的路由信息"""
        return self._request("GET", f"/api/routing/{quote(enum_value(document_type), safe='')}")

    def close(self):
        """关闭客户端"""
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


# 便捷函数
def extract_document(
    document: DocumentSource,
    base_url: str = DEFAULT_BASE_URL,
    api_key: Optional[str] = None,
    client_id: str = DEFAULT_CLIENT_ID,
    **options,
) -> Dict[str, Any]:
    """
    便捷函数：提取单个文档

    Args:
        document: 文件路径或字节数据
        base_url: Gateway 地址
        api_key: Bearer Token
        client_id: 用量统计标识
        **options: 透传给 DocuExtractClient.extract

    Returns:
        提取结果
    """
    with DocuExtractClient(base_url=base_url, api_key=api_key, client_id=client_id) as client:
        return client.extract(document, **options)

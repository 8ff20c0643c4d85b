"""
DocuExtract 客户端配置

支持直接构造或从环境变量加载
"""

import os
import logging
from dataclasses import dataclass, replace
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_CLIENT_ID = "default"


@dataclass(frozen=True)
class ClientConfig:
    """DocuExtract Gateway 连接配置"""

    base_url: str = DEFAULT_BASE_URL
    api_key: Optional[str] = None
    client_id: str = DEFAULT_CLIENT_ID

    def __post_init__(self):
        if not self.base_url or not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base URL: {self.base_url!r}")
        # frozen dataclass 只能通过 object.__setattr__ 规范化
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """从环境变量创建配置"""
        config = cls(
            base_url=os.getenv("DOCUEXTRACT_BASE_URL") or DEFAULT_BASE_URL,
            api_key=os.getenv("DOCUEXTRACT_API_KEY") or None,
            client_id=os.getenv("DOCUEXTRACT_CLIENT_ID") or DEFAULT_CLIENT_ID,
        )
        logger.debug(
            "DocuExtract config loaded: %s (client_id=%s, auth=%s)",
            config.base_url,
            config.client_id,
            "on" if config.api_key else "off",
        )
        return config

    def with_client_id(self, client_id: str) -> "ClientConfig":
        """返回替换了 client_id 的新配置"""
        return replace(self, client_id=client_id)

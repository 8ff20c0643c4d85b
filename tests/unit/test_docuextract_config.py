"""
ClientConfig 与 MIME 映射单元测试
"""

import os
from unittest.mock import patch

import pytest

from docuextract import ClientConfig, get_mime_type


class TestClientConfig:
    """ClientConfig 配置测试"""

    def test_defaults(self):
        config = ClientConfig()
        assert config.base_url == "http://localhost:3000"
        assert config.api_key is None
        assert config.client_id == "default"

    def test_strips_trailing_slash(self):
        """URL 末尾的斜杠被移除"""
        assert ClientConfig(base_url="https://gw.example.com/").base_url == "https://gw.example.com"

    @pytest.mark.parametrize("base_url", ["", "gw.example.com", "ftp://gw.example.com"])
    def test_rejects_invalid_base_url(self, base_url):
        with pytest.raises(ValueError):
            ClientConfig(base_url=base_url)

    def test_immutable(self):
        """配置构造后不可修改"""
        config = ClientConfig()
        with pytest.raises(AttributeError):
            config.api_key = "k"

    def test_with_client_id_returns_copy(self):
        config = ClientConfig(api_key="k")
        updated = config.with_client_id("x")
        assert updated.client_id == "x"
        assert updated.api_key == "k"
        assert config.client_id == "default"

    @patch.dict(os.environ, {
        "DOCUEXTRACT_BASE_URL": "http://gateway:3000/",
        "DOCUEXTRACT_API_KEY": "secret",
        "DOCUEXTRACT_CLIENT_ID": "billing",
    })
    def test_from_env_with_all_vars(self):
        """环境变量完整时正确加载配置"""
        config = ClientConfig.from_env()
        assert config.base_url == "http://gateway:3000"
        assert config.api_key == "secret"
        assert config.client_id == "billing"

    @patch.dict(os.environ, {"DOCUEXTRACT_API_KEY": "", "DOCUEXTRACT_CLIENT_ID": ""}, clear=True)
    def test_from_env_defaults_when_empty(self):
        """环境变量为空时使用默认值"""
        config = ClientConfig.from_env()
        assert config.base_url == "http://localhost:3000"
        assert config.api_key is None
        assert config.client_id == "default"


class TestMimeTypes:
    """MIME 映射测试"""

    def test_with_and_without_dot(self):
        assert get_mime_type(".pdf") == "application/pdf"
        assert get_mime_type("PDF") == "application/pdf"

    def test_unknown_extension(self):
        assert get_mime_type(".xyz") == "application/octet-stream"
        assert get_mime_type("") == "application/octet-stream"

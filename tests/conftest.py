"""
Pytest 配置和共享 Fixtures
"""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

# 未安装时也能直接运行测试
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from docuextract import ClientConfig, DocuExtractClient


@pytest.fixture
def make_response():
    """构造 mock HTTP 响应"""
    def _make(json_data=None, status_code=200, text=None, url="http://localhost:3000"):
        response = Mock()
        response.status_code = status_code
        response.url = url
        response.text = text if text is not None else ""
        response.json.return_value = json_data
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.exceptions.HTTPError(
                f"{status_code} Error", response=response
            )
        else:
            response.raise_for_status = Mock()
        return response
    return _make


@pytest.fixture
def mock_session():
    return Mock()


@pytest.fixture
def client(mock_session):
    """带 mock session 的客户端"""
    c = DocuExtractClient(ClientConfig(base_url="http://localhost:3000"))
    c._session = mock_session
    return c

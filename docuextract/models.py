"""
DocuExtract 枚举类型与 MIME 映射
"""

from enum import Enum


class DocumentType(str, Enum):
    """文档类型枚举"""
    INVOICE = "invoice"
    RECEIPT = "receipt"
    FORM = "form"
    CONTRACT = "contract"
    ID_DOCUMENT = "id_document"
    GENERIC = "generic"


class ProviderName(str, Enum):
    """提取服务提供方"""
    LANGEXTRACT = "langextract"
    AWS = "aws"
    AZURE = "azure"


DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES = {
    ".pdf": "application/pdf",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".tiff": "image/tiff",
    ".tif": "image/tiff",
    ".bmp": "image/bmp",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


def get_mime_type(extension: str) -> str:
    """
    根据文件扩展名获取 MIME 类型

    Args:
        extension: 扩展名，带或不带前导点，大小写不敏感

    Returns:
        MIME 类型，未知扩展名返回 application/octet-stream
    """
    ext = extension.lower()
    if ext and not ext.startswith("."):
        ext = f".{ext}"
    return MIME_TYPES.get(ext, DEFAULT_MIME_TYPE)


def enum_value(value):
    """枚举成员转为字符串值，其他原样返回"""
    return value.value if isinstance(value, Enum) else value

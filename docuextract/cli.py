"""
DocuExtract 命令行工具
支持从命令行直接调用 DocuExtract Gateway
"""

import sys
import json
import logging
import argparse

from .client import DocuExtractClient
from .config import ClientConfig
from .exceptions import DocuExtractError, GatewayConnectionError
from .models import DocumentType, ProviderName


def _build_client(args) -> DocuExtractClient:
    return DocuExtractClient(
        ClientConfig.from_env(),
        base_url=args.url,
        api_key=args.api_key,
        client_id=args.client_id,
    )


def _print_json(data):
    print(json.dumps(data, indent=2, ensure_ascii=False))


def cmd_health(client, args):
    """健康检查命令"""
    _print_json(client.health_check())


def cmd_providers(client, args):
    """提供方列表命令"""
    _print_json(client.get_providers())


def cmd_pricing(client, args):
    """价格信息命令"""
    _print_json(client.get_pricing())


def cmd_usage(client, args):
    """用量统计命令"""
    _print_json(client.get_usage())


def cmd_routing(client, args):
    """路由信息命令"""
    _print_json(client.get_routing(args.document_type))


def cmd_extract(client, args):
    """文档提取命令"""
    result = client.extract(
        args.file,
        document_type=args.type,
        force_provider=args.provider,
    )

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            json.dump(result, f, ensure_ascii=False, indent=2)
        print(f"✅ 结果已保存到: {args.output}", file=sys.stderr)
    elif args.text:
        print((result.get("extraction") or {}).get("text", ""))
    else:
        _print_json(result)


COMMANDS = {
    "health": cmd_health,
    "providers": cmd_providers,
    "pricing": cmd_pricing,
    "usage": cmd_usage,
    "routing": cmd_routing,
    "extract": cmd_extract,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docuextract",
        description="DocuExtract Gateway 命令行工具",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  # 健康检查
  docuextract health

  # 提取发票
  docuextract extract invoice.pdf --type invoice

  # 只输出文本
  docuextract extract scan.png --text

  # 查询路由
  docuextract routing receipt
        """
    )

    parser.add_argument("--url", help="Gateway 地址 (默认: $DOCUEXTRACT_BASE_URL 或 http://localhost:3000)")
    parser.add_argument("--api-key", help="API Key (默认: $DOCUEXTRACT_API_KEY)")
    parser.add_argument("--client-id", help="用量统计标识 (默认: $DOCUEXTRACT_CLIENT_ID 或 default)")
    parser.add_argument("--verbose", "-v", action="store_true", help="输出调试日志")

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    subparsers.add_parser("health", help="提供方健康状态")
    subparsers.add_parser("providers", help="提供方列表")
    subparsers.add_parser("pricing", help="价格信息")
    subparsers.add_parser("usage", help="当前 client 的用量统计")

    routing_parser = subparsers.add_parser("routing", help="文档类型的路由信息")
    routing_parser.add_argument("document_type", choices=[t.value for t in DocumentType], help="文档类型")

    extract_parser = subparsers.add_parser("extract", help="提取文档")
    extract_parser.add_argument("file", help="文档文件路径")
    extract_parser.add_argument("--type", "-t", choices=[t.value for t in DocumentType],
                                help="文档类型 (默认由 Gateway 判断)")
    extract_parser.add_argument("--provider", "-p", choices=[p.value for p in ProviderName],
                                help="强制指定提供方")
    output_group = extract_parser.add_mutually_exclusive_group()
    output_group.add_argument("--output", "-o", help="输出JSON文件路径")
    output_group.add_argument("--text", action="store_true", help="只输出提取的文本")

    return parser


def main(argv=None):
    """主函数"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        with _build_client(args) as client:
            COMMANDS[args.command](client, args)
    except GatewayConnectionError:
        print("❌ 服务不可用，请检查服务地址和状态", file=sys.stderr)
        sys.exit(1)
    except (DocuExtractError, OSError, ValueError) as e:
        print(f"❌ 错误: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n⚠️  操作已取消", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()

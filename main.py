"""
Main entry point for the Quote Service.
Provides command-line interface and system initialization.
"""

import asyncio
import argparse
import sys

from utils import api_logger, main_logger, config_manager, initialize_logging, QuoteSystemError
from quote_store import create_quote_store


class QuoteService:
    """语录服务主类"""

    def __init__(self):
        self.config = config_manager

    async def start_api_server(self, host: str = None, port: int = None):
        """启动API服务器"""
        import uvicorn
        from api.app import app as api_app

        api_config = self.config.get_api_config()

        # 使用配置文件的值，如果命令行参数未提供
        final_host = host if host is not None else api_config.host
        final_port = port if port is not None else api_config.port

        self._print_banner(final_port)
        api_logger.info(f"[Main] Starting API server on {final_host}:{final_port}")

        config = uvicorn.Config(
            api_app,
            host=final_host,
            port=final_port,
            log_level="info"
        )
        server = uvicorn.Server(config)
        await server.serve()

    def show_status(self):
        """显示数据状态"""
        store = create_quote_store()
        app_config = self.config.get_app_config()

        print("=" * 40)
        print("Quote Service Status")
        print(f"Environment: {app_config.environment}")
        print(f"Data file:   {app_config.data_file}")
        print(f"Quotes:      {len(store)}")
        print(f"Categories:  {', '.join(store.categories())}")
        print("=" * 40)

    def _print_banner(self, port: int):
        app_config = self.config.get_app_config()
        base = f"http://localhost:{port}"
        print("=" * 40)
        print("Quote Service Server Running")
        print(f"Port: {port}")
        print(f"Environment: {app_config.environment}")
        print("=" * 40)
        print("API Endpoints:")
        print(f"   Health:     {base}/health")
        print(f"   All Quotes: {base}/api/quotes")
        print(f"   Random:     {base}/api/quotes/random")
        print(f"   By ID:      {base}/api/quotes/1")
        print(f"   Category:   {base}/api/quotes/category/motivation")
        print(f"   Docs:       {base}/docs")
        print(f"Frontend:   {base}")


def create_parser():
    """创建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        description="Quote Service - 语录 API 服务",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用示例:
  python main.py api                         # 按配置启动API服务器
  python main.py api --host 127.0.0.1 --port 8080
  python main.py status                      # 显示数据状态
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='可用命令')

    api_parser = subparsers.add_parser('api', help='启动API服务器')
    api_parser.add_argument('--host', default=None, help='监听地址 (默认取配置)')
    api_parser.add_argument('--port', type=int, default=None, help='监听端口 (默认取配置)')

    subparsers.add_parser('status', help='显示数据状态')

    return parser


async def main(argv=None):
    """主函数"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    initialize_logging()
    service = QuoteService()

    try:
        if args.command == 'api':
            await service.start_api_server(host=args.host, port=args.port)
        elif args.command == 'status':
            service.show_status()
    except QuoteSystemError as e:
        main_logger.error(f"[Main] {e}")
        return 1
    except KeyboardInterrupt:
        main_logger.info("[Main] Received keyboard interrupt, shutting down...")

    return 0


def run():
    """控制台脚本入口"""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()

"""CLI entrypoint for the hello site.

Usage:
    hello serve
    hello serve --host 127.0.0.1 --port 8080
    hello routes
"""
import argparse
import logging
import os
import sys

from hello_web.app import create_app, get_host, get_port

logger = logging.getLogger("hello")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None):
    level = (level or os.environ.get("HELLO_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(format=LOG_FORMAT)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)


def cmd_serve(args):
    host = args.host or get_host()
    port = args.port if args.port is not None else get_port()
    application = create_app()
    logger.info("Serving %s on http://%s:%d", application.static_folder, host, port)
    application.run(host=host, port=port, debug=args.debug)


def cmd_routes(args):
    application = create_app()
    for rule in sorted(application.url_map.iter_rules(), key=lambda r: r.rule):
        methods = ",".join(sorted(rule.methods - {"HEAD", "OPTIONS"}))
        print(f"{rule.rule:<24} {methods:<8} {rule.endpoint}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="hello", description="Minimal homepage server")
    parser.add_argument("--log-level", default=None, help="Logging level (default: HELLO_LOG_LEVEL or INFO)")
    sub = parser.add_subparsers(dest="cmd")

    p_serve = sub.add_parser("serve", help="Run the web server")
    p_serve.add_argument("--host", default=None, help="Bind address (default: HELLO_HOST or 0.0.0.0)")
    p_serve.add_argument("--port", type=int, default=None, help="Bind port (default: HELLO_PORT or 3000)")
    p_serve.add_argument("--debug", action="store_true", help="Enable the Flask debugger and reloader")
    p_serve.set_defaults(func=cmd_serve)

    p_routes = sub.add_parser("routes", help="List registered URL rules")
    p_routes.set_defaults(func=cmd_routes)

    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    try:
        args.func(args)
    except Exception as e:
        logger.error("Error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

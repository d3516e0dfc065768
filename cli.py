#!/usr/bin/env python3
"""
Command-line interface for the modular monolith demo.

Usage:
    uv run python cli.py [options] [command] [args]

Commands:
    demo        Run demo scenarios
    modules     Verify module boundaries and print the module structure
    test        Run the test suite
    serve       Start the API server

Examples:
    uv run python cli.py demo happy
    uv run python cli.py --policy strict demo over-capacity
    uv run python cli.py modules
    uv run python cli.py serve
"""

import argparse
import logging
import subprocess
import sys

from pydantic import ValidationError

from shared.config import AppConfig, DEFAULT_CAPACITY_CAP, ReservationPolicy


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
        datefmt="%H:%M:%S",
    )


def run_demo(scenario: str, config: AppConfig) -> None:
    """Run a demo scenario."""
    from demo import run_all, run_scenario

    if scenario == "all":
        run_all(config=config)
    else:
        run_scenario(scenario, config=config)


def run_modules() -> None:
    """Verify module boundaries and print the structure."""
    from modularity import ModuleBoundaryViolation, describe_modules, verify

    try:
        verify()
    except ModuleBoundaryViolation as e:
        print(e)
        sys.exit(1)

    print(describe_modules())
    print("Module boundaries verified.")


def run_tests(args: list[str]) -> None:
    """Run the test suite."""
    cmd = ["uv", "run", "pytest"] + args
    subprocess.run(cmd)


def run_server(host: str, port: int, reload: bool, config: AppConfig) -> None:
    """Start the API server."""
    import uvicorn

    print(f"Starting server at http://{host}:{port}")
    print(f"API docs available at http://{host}:{port}/docs")

    if reload:
        # The reloader re-imports the app in a child process, so flags can't reach it
        print("Auto-reload enabled: running with the default configuration")
        uvicorn.run("api.main:app", host=host, port=port, reload=True)
        return

    from api.main import app, build_server_application, reset_application

    reset_application(build_server_application(config))
    uvicorn.run(app, host=host, port=port)


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Modular Monolith Demo CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo happy
  %(prog)s --policy strict demo over-capacity
  %(prog)s demo all
  %(prog)s modules
  %(prog)s test -v
  %(prog)s serve --reload
        """,
    )
    parser.add_argument(
        "--policy",
        choices=[p.value for p in ReservationPolicy],
        default=ReservationPolicy.CAPACITY.value,
        help="Inventory reservation policy",
    )
    parser.add_argument(
        "--capacity-cap",
        type=int,
        default=DEFAULT_CAPACITY_CAP,
        help="Maximum total quantity per order under the capacity policy",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run demo scenarios")
    demo_parser.add_argument(
        "scenario",
        choices=["happy", "rejected", "over-capacity", "empty", "all"],
        help="Which scenario to run",
    )

    # Modules command
    subparsers.add_parser("modules", help="Verify and print module structure")

    # Test command
    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest",
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    args = parser.parse_args()

    try:
        config = AppConfig(
            reservation_policy=args.policy,
            capacity_cap=args.capacity_cap,
            log_level=args.log_level,
        )
    except ValidationError as e:
        parser.error(str(e))

    configure_logging(config.log_level)

    if args.command == "demo":
        run_demo(args.scenario, config)
    elif args.command == "modules":
        run_modules()
    elif args.command == "test":
        run_tests(args.pytest_args)
    elif args.command == "serve":
        run_server(args.host, args.port, args.reload, config)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()

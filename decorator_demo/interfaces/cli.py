"""
CLI Interface

Command-line interface for the decorator demonstration.
Runs the default demo, a custom decorator chain, or shows configuration.
"""

import sys
import argparse
import logging
from typing import List, Optional

from pydantic import ValidationError

from decorator_demo.application.client import DECORATORS, build_chain, client_code, run_demo
from decorator_demo.application.models import ChainSpec
from decorator_demo.infrastructure.config import get_config, setup_logging

logger = logging.getLogger(__name__)

# Bare --chain: use DECORATOR_CHAIN from the configuration
CONFIGURED_CHAIN = object()


def print_header(title: str) -> None:
    """Print formatted header."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def run_chain(names: str) -> int:
    """
    Build a chain from decorator names and hand it to the client.

    Args:
        names: Comma-separated decorator names, innermost first

    Returns:
        Process exit code
    """
    try:
        spec = ChainSpec(decorators=names)
    except ValidationError as e:
        for error in e.errors():
            print(f"[ERROR] {error['msg']}", file=sys.stderr)
        return 2

    component = build_chain(spec.decorators)
    logger.info("Running chain %s", ",".join(spec.decorators) or "<none>")
    if spec.decorators:
        print("Client: Now I have a decorated component:")
    else:
        print("Client: I have a simple component:")
    client_code(component)
    print("\n")
    return 0


def show_status() -> None:
    """Display current configuration."""
    print_header("CONFIGURATION STATUS")

    config = get_config()
    print(f"Log Level: {config.effective_log_level()}")
    print(f"Debug: {config.debug}")
    print(f"Default Chain: {config.default_chain}")
    print()
    print("Available Decorators:")
    for name, decorator in DECORATORS.items():
        print(f"  - {name}: {decorator.__name__}")
    print()
    print("To change the default chain, set DECORATOR_CHAIN in .env file:")
    print("  DECORATOR_CHAIN=A,B   # ConcreteDecoratorB(ConcreteDecoratorA(...))")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Decorator Pattern Demonstration - stackable decorators around a component",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the default demonstration
  python -m decorator_demo.interfaces.cli

  # Wrap the component in B first, then A
  python -m decorator_demo.interfaces.cli --chain B,A

  # Use the chain configured in DECORATOR_CHAIN
  python -m decorator_demo.interfaces.cli --chain

  # Show current configuration
  python -m decorator_demo.interfaces.cli --status
        """
    )

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--chain", "-c",
        const=CONFIGURED_CHAIN,
        nargs="?",
        metavar="NAMES",
        help="Comma-separated decorators, innermost first (default: DECORATOR_CHAIN)"
    )
    mode_group.add_argument(
        "--status", "-S",
        action="store_true",
        help="Show current configuration"
    )

    parser.add_argument(
        "--log-level", "-l",
        type=str,
        help="Override the configured log level"
    )

    args = parser.parse_args(argv)
    try:
        setup_logging(args.log_level)
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    if args.chain is CONFIGURED_CHAIN:
        return run_chain(get_config().default_chain)
    elif args.chain is not None:
        return run_chain(args.chain)
    elif args.status:
        show_status()
    else:
        run_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())

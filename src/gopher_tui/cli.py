"""Command-line interface for the Gopher browser."""

import argparse
import logging
import signal
import sys
import termios
from dataclasses import replace

from . import __version__
from .browser import GopherBrowser
from .config import Config, load_config
from .core import AddressFormatError, is_valid_port, parse_address
from .terminal import AnsiTerminal, TerminalInput
from .transport import SocketTransport


def setup_logging(verbose: bool = False, log_file: str | None = None) -> None:
    """Configure logging.

    The browser owns the terminal, so records only go to a file. Without
    one they are discarded.
    """
    level = logging.DEBUG if verbose else logging.INFO
    if log_file:
        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            filename=log_file,
        )
    else:
        logging.basicConfig(level=level, handlers=[logging.NullHandler()])


def port_number(text: str) -> int:
    """argparse type for a TCP port in 1-65535."""
    try:
        port = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text}")
    if not is_valid_port(port):
        raise argparse.ArgumentTypeError(f"out of range: {port}")
    return port


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gopher-tui",
        description="gopher-tui - Browse Gopher space from the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s gopher.floodgap.com              # Open the root menu
  %(prog)s gopher://example.org:7070/1/dir  # Open a specific selector
  %(prog)s -c config.yaml example.org       # Use a config file
  %(prog)s --log-file /tmp/gopher.log -v example.org
""",
    )

    parser.add_argument(
        "address",
        nargs="?",
        help="Gopher address, e.g. 'example.org' or 'gopher://example.org:70/1/dir'",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-p", "--port",
        type=port_number,
        metavar="PORT",
        help="Port to use when the address has none",
    )

    parser.add_argument(
        "-t", "--timeout",
        type=float,
        metavar="SECONDS",
        help="Network timeout per request",
    )

    parser.add_argument(
        "--log-file",
        metavar="FILE",
        help="Write log records to this file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            print(f"Error: Config file not found: {args.config}", file=sys.stderr)
            return 1
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    else:
        config = Config()

    # Override config with command line arguments
    if args.port is not None:
        config = replace(config, default_port=args.port)
    if args.timeout is not None:
        config = replace(config, timeout_seconds=args.timeout)
    if args.log_file:
        config = replace(config, log_file=args.log_file)

    log_path = config.get_log_path()
    setup_logging(args.verbose, str(log_path) if log_path else None)
    logger = logging.getLogger(__name__)

    if args.address is None:
        build_parser().print_help()
        return 0

    try:
        address = parse_address(args.address, default_port=config.default_port)
    except AddressFormatError as e:
        print(f"Error: Invalid Gopher address: {e}", file=sys.stderr)
        return 1

    # Create components
    try:
        terminal = AnsiTerminal(sys.stdin.fileno(), sys.stdout.fileno())
        input_source = TerminalInput(sys.stdin.fileno())
        transport = SocketTransport(
            timeout=config.timeout_seconds,
            chunk_size=config.receive_chunk_size,
        )
        browser = GopherBrowser(transport, terminal, input_source, config)
    except Exception as e:
        logger.error(f"Failed to initialize browser: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Termination signals unwind through the context managers below
    def signal_handler(sig, frame):
        logger.info(f"Signal {sig} received")
        sys.exit(0)

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGHUP, signal_handler)

    logger.info(f"Starting gopher-tui {__version__} at {address}")

    try:
        with terminal.raw_mode(), input_source.resize_notifications():
            browser.run(address)
    except termios.error as e:
        logger.error(f"Terminal setup failed: {e}")
        print("Error: gopher-tui needs an interactive terminal", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception(f"Browser error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        browser.close()

    logger.info("Browser closed")
    return 0


if __name__ == "__main__":
    sys.exit(main())

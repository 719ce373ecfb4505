"""Configuration handling for the Gopher browser."""

from dataclasses import dataclass
from pathlib import Path
import yaml

from .core.address import is_valid_port


@dataclass
class Config:
    """Configuration settings for the Gopher browser.

    Attributes:
        default_port: Port used when an address does not name one.
        timeout_seconds: Socket timeout for each fetch.
        receive_chunk_size: Bytes read per recv() call.
        content_width: Maximum columns used for menus and text.
        show_item_types: Prefix menu items with tags such as <DIR>.
        poll_interval_ms: Longest wait for input before re-checking state.
        log_file: File that receives log records (None disables logging).
    """

    default_port: int = 70
    timeout_seconds: float = 15.0
    receive_chunk_size: int = 4096
    content_width: int = 78
    show_item_types: bool = False
    poll_interval_ms: int = 100
    log_file: str | None = None

    def get_log_path(self) -> Path | None:
        """Get log file as expanded Path object, or None if unset."""
        if not self.log_file:
            return None
        return Path(self.log_file).expanduser()


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If network.default_port is not a valid port.
    """
    config_path = Path(path).expanduser()

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    # Extract sections
    network = data.get("network") or {}
    display = data.get("display") or {}
    input_section = data.get("input") or {}
    logging_section = data.get("logging") or {}

    default_port = network.get("default_port", Config.default_port)
    if not isinstance(default_port, int) or not is_valid_port(default_port):
        raise ValueError(f"Invalid network.default_port: {default_port!r}")

    return Config(
        default_port=default_port,
        timeout_seconds=network.get("timeout_seconds", Config.timeout_seconds),
        receive_chunk_size=network.get("receive_chunk_size", Config.receive_chunk_size),
        content_width=display.get("content_width", Config.content_width),
        show_item_types=display.get("show_item_types", Config.show_item_types),
        poll_interval_ms=input_section.get("poll_interval_ms", Config.poll_interval_ms),
        log_file=logging_section.get("file", Config.log_file),
    )

"""Configuration management for Agora.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

from agora.client.endpoints import DEFAULT_BASE_URL
from agora.shell.layout import DEFAULT_APP_NAME
from agora.shell.panel import DEFAULT_BREAKPOINT

CONFIG_FILENAME = "agora.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class ApiConfig:
    """Backend API configuration."""

    base_url: str | None = None
    timeout: float = 10.0

    @property
    def effective_base_url(self) -> str:
        return DEFAULT_BASE_URL if self.base_url is None else self.base_url


@dataclass
class ShellConfig:
    """Navigation shell configuration."""

    app_name: str = DEFAULT_APP_NAME
    breakpoint: int = DEFAULT_BREAKPOINT


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    api: ApiConfig
    shell: ShellConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for agora.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        return cls(server=ServerConfig(), api=ApiConfig(), shell=ShellConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        return cls(
            server=cls._parse_server(data.get("server")),
            api=cls._parse_api(data.get("api")),
            shell=cls._parse_shell(data.get("shell")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_api(cls, data: object) -> ApiConfig:
        """Parse api configuration section.

        Args:
            data: Raw api section data

        Returns:
            ApiConfig instance
        """
        if data is None:
            return ApiConfig()

        if not isinstance(data, dict):
            raise ValueError("api section must be a dictionary")

        base_url = data.get("base_url")
        if base_url is not None and not isinstance(base_url, str):
            raise ValueError("api.base_url must be a string")

        timeout = data.get("timeout", 10.0)
        if not isinstance(timeout, int | float) or isinstance(timeout, bool):
            raise ValueError("api.timeout must be a number")
        if timeout <= 0:
            raise ValueError("api.timeout must be positive")

        return ApiConfig(base_url=base_url, timeout=float(timeout))

    @classmethod
    def _parse_shell(cls, data: object) -> ShellConfig:
        """Parse shell configuration section.

        Args:
            data: Raw shell section data

        Returns:
            ShellConfig instance
        """
        if data is None:
            return ShellConfig()

        if not isinstance(data, dict):
            raise ValueError("shell section must be a dictionary")

        app_name = data.get("app_name", DEFAULT_APP_NAME)
        if not isinstance(app_name, str):
            raise ValueError("shell.app_name must be a string")

        breakpoint = data.get("breakpoint", DEFAULT_BREAKPOINT)
        if not isinstance(breakpoint, int) or isinstance(breakpoint, bool):
            raise ValueError("shell.breakpoint must be an integer")
        if breakpoint <= 0:
            raise ValueError("shell.breakpoint must be positive")

        return ShellConfig(app_name=app_name, breakpoint=breakpoint)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        base_url: str | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            base_url: Override api.base_url

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        api = self.api
        if base_url is not None:
            api = replace(self.api, base_url=base_url)

        return replace(self, server=server, api=api)

"""
Configuration management for the Vibe Coder brief generator.

Provides dataclasses for all configuration options with sensible defaults,
environment overrides, YAML file loading, and saving.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from pathlib import Path
import os
import yaml


@dataclass
class HuggingFaceConfig:
    """Settings for the Hugging Face inference provider."""
    api_key: Optional[str] = field(default_factory=lambda: os.getenv("HUGGINGFACE_API_KEY") or None)
    model: str = field(default_factory=lambda: os.getenv("HUGGINGFACE_MODEL", "google/flan-t5-small"))
    base_url: str = "https://api-inference.huggingface.co/models"
    max_new_tokens: int = 512
    timeout: float = 60.0  # seconds

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


@dataclass
class OpenAIConfig:
    """Settings for the OpenAI chat-completion provider."""
    api_key: Optional[str] = field(default_factory=lambda: os.getenv("OPENAI_API_KEY") or None)
    model: str = field(default_factory=lambda: os.getenv("OPENAI_MODEL", "gpt-3.5-turbo"))
    max_tokens: int = 700
    temperature: float = 0.7
    timeout: float = 60.0  # seconds

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


@dataclass
class ProvidersConfig:
    """Per-provider settings."""
    huggingface: HuggingFaceConfig = field(default_factory=HuggingFaceConfig)
    openai: OpenAIConfig = field(default_factory=OpenAIConfig)


@dataclass
class ChainConfig:
    """Behaviour of the provider fallback chain."""
    # When every configured provider fails, answer with the local brief
    # instead of the quota-exceeded result.
    local_fallback_on_failure: bool = False


@dataclass
class ServerConfig:
    """Settings for the HTTP API."""
    host: str = "0.0.0.0"
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "5000")))
    cors_origins: str = field(default_factory=lambda: os.getenv("CORS_ORIGINS", "*"))

    @property
    def allowed_origins(self):
        """Either "*" or the list of comma separated origins."""
        if self.cors_origins.strip() == "*":
            return "*"
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    file: Optional[Path] = None

    def __post_init__(self):
        if self.file and isinstance(self.file, str):
            self.file = Path(self.file)


@dataclass
class AppConfig:
    """
    Root configuration object containing all settings.

    Can be loaded from YAML file or constructed programmatically.
    Values missing from the file fall back to environment variables
    and then to the defaults above.
    """
    providers: ProvidersConfig = field(default_factory=ProvidersConfig)
    chain: ChainConfig = field(default_factory=ChainConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> 'AppConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is not a mapping
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            AppConfig instance
        """
        providers_data = data.get('providers', {})

        providers = ProvidersConfig(
            huggingface=HuggingFaceConfig(**providers_data.get('huggingface', {})),
            openai=OpenAIConfig(**providers_data.get('openai', {})),
        )

        return cls(
            providers=providers,
            chain=ChainConfig(**data.get('chain', {})),
            server=ServerConfig(**data.get('server', {})),
            logging=LoggingConfig(**data.get('logging', {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to a dictionary.

        API keys are never written out.
        """
        hf = self.providers.huggingface
        oa = self.providers.openai
        return {
            'providers': {
                'huggingface': {
                    'model': hf.model,
                    'base_url': hf.base_url,
                    'max_new_tokens': hf.max_new_tokens,
                    'timeout': hf.timeout,
                },
                'openai': {
                    'model': oa.model,
                    'max_tokens': oa.max_tokens,
                    'temperature': oa.temperature,
                    'timeout': oa.timeout,
                },
            },
            'chain': {
                'local_fallback_on_failure': self.chain.local_fallback_on_failure,
            },
            'server': {
                'host': self.server.host,
                'port': self.server.port,
                'cors_origins': self.server.cors_origins,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file': str(self.logging.file) if self.logging.file else None,
            },
        }

    def save_yaml(self, path: Path | str) -> None:
        """
        Save configuration to a YAML file.

        Args:
            path: Path to output YAML file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


def get_default_config() -> AppConfig:
    """Get the application configuration built from defaults and environment."""
    return AppConfig()


def load_config(config_path: Optional[Path | str] = None) -> AppConfig:
    """
    Load configuration from file or return defaults.

    Looks for config in this order:
    1. Provided path
    2. ./config/default.yaml
    3. ./config.yaml
    4. ~/.vibecoder/config.yaml
    5. Default values

    Args:
        config_path: Optional path to config file

    Returns:
        AppConfig instance
    """
    if config_path:
        return AppConfig.from_yaml(config_path)

    default_paths = [
        Path("config/default.yaml"),
        Path("config.yaml"),
        Path.home() / ".vibecoder" / "config.yaml",
    ]

    for path in default_paths:
        if path.exists():
            return AppConfig.from_yaml(path)

    return get_default_config()

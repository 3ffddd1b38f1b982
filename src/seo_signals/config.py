from dotenv import load_dotenv
from dataclasses import dataclass
from typing import Optional
from pathlib import Path
import json
import os

load_dotenv()  # Loads variables from .env file


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if not value:
        return None
    return float(value)


@dataclass
class Config:
    """Configuration for page analysis."""
    user_agent: str = "SEO-Signals-Bot/1.0"
    timeout: int = 30  # page fetch timeout (seconds)
    max_retries: int = 3
    max_concurrent_probes: int = 10
    probe_timeout: float = 10.0  # per broken-link probe (seconds)
    analysis_timeout: Optional[float] = None  # whole analysis, None = unbounded
    strict_structured_data: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        return cls(
            user_agent=os.getenv("USER_AGENT", "SEO-Signals-Bot/1.0"),
            timeout=int(os.getenv("TIMEOUT", "30")),
            max_retries=int(os.getenv("MAX_RETRIES", "3")),
            max_concurrent_probes=int(os.getenv("MAX_CONCURRENT_PROBES", "10")),
            probe_timeout=float(os.getenv("PROBE_TIMEOUT", "10")),
            analysis_timeout=_env_float("ANALYSIS_TIMEOUT"),
            strict_structured_data=_env_bool("STRICT_STRUCTURED_DATA"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE") or None,
        )


@dataclass
class AnalysisThresholds:
    """Configurable thresholds for signal extraction."""

    # Content
    content_length_min_words: int = 300
    readability_max_words_per_sentence: float = 20.0
    keyword_density_top_n: int = 10

    # URL structure
    url_max_path_segments: int = 3  # counts the empty segment before the leading slash

    @classmethod
    def from_env(cls) -> "AnalysisThresholds":
        """Load thresholds from environment variables.

        Environment variables should be prefixed with SEO_THRESHOLD_
        e.g., SEO_THRESHOLD_CONTENT_LENGTH_MIN_WORDS=500

        Returns:
            AnalysisThresholds with values from environment
        """
        thresholds = cls()
        prefix = "SEO_THRESHOLD_"

        for field_name in thresholds.__dataclass_fields__:
            env_key = f"{prefix}{field_name.upper()}"
            env_value = os.getenv(env_key)

            if env_value is not None:
                field_type = thresholds.__dataclass_fields__[field_name].type
                try:
                    if field_type in (int, "int"):
                        setattr(thresholds, field_name, int(env_value))
                    elif field_type in (float, "float"):
                        setattr(thresholds, field_name, float(env_value))
                except ValueError:
                    pass  # Keep default if conversion fails

        return thresholds

    @classmethod
    def from_file(cls, path: str) -> "AnalysisThresholds":
        """Load thresholds from a JSON configuration file.

        Args:
            path: Path to JSON configuration file

        Returns:
            AnalysisThresholds with values from file
        """
        thresholds = cls()
        file_path = Path(path)

        if not file_path.exists():
            return thresholds

        with open(file_path, 'r') as f:
            config = json.load(f)

        threshold_config = config.get('thresholds', config)

        for field_name in thresholds.__dataclass_fields__:
            if field_name in threshold_config:
                setattr(thresholds, field_name, threshold_config[field_name])

        return thresholds

    def to_dict(self) -> dict:
        """Convert thresholds to dictionary."""
        return {
            field_name: getattr(self, field_name)
            for field_name in self.__dataclass_fields__
        }

    def save_to_file(self, path: str) -> None:
        """Save current thresholds to a JSON file.

        Args:
            path: Path to save configuration
        """
        with open(path, 'w') as f:
            json.dump({'thresholds': self.to_dict()}, f, indent=2)


# Global default thresholds instance
default_thresholds = AnalysisThresholds()

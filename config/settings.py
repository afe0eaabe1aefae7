"""
Central configuration for the ABA bank file generator.
All tunable parameters are exposed here with sensible defaults.
"""

from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import Field


class GeneratorConfig(BaseSettings):
    """Configuration for ABA file generation."""

    # Banks expect DOS line endings
    line_separator: str = Field(
        default="\r\n",
        description="Separator placed between rendered record lines"
    )

    encoding: str = Field(
        default="ascii",
        description="Encoding used when writing files to disk"
    )

    class Config:
        env_prefix = "ABA_GENERATOR_"


class ParserConfig(BaseSettings):
    """Configuration for ABA file parsing."""

    strict_line_length: bool = Field(
        default=True,
        description="Reject lines that are not exactly 120 characters"
    )

    class Config:
        env_prefix = "ABA_PARSER_"


class AppConfig(BaseSettings):
    """Main application configuration."""

    # Paths
    base_dir: Path = Path(__file__).parent.parent
    output_dir: Path = Field(default_factory=lambda: Path(__file__).parent.parent / "output")

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Processing
    max_transactions: int = 10000

    # Logging
    log_level: str = "INFO"

    def ensure_directories(self):
        """Create necessary directories if they don't exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)

    class Config:
        env_prefix = "ABA_APP_"


# Global configuration instances
generator_config = GeneratorConfig()
parser_config = ParserConfig()
app_config = AppConfig()

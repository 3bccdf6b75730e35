"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use HTMLRENDER_ prefix (e.g., HTMLRENDER_ANSI_STYLES=true).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.directives import LINE_BUDGET


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use HTMLRENDER_ prefix.

    Examples:
        HTMLRENDER_LINE_BUDGET=4800
        HTMLRENDER_RULE_CHAR==
        HTMLRENDER_DEBUG_MODE=true
    """

    model_config = SettingsConfigDict(
        env_prefix="HTMLRENDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Formatter configuration
    line_budget: int = Field(
        default=LINE_BUDGET,
        gt=0,
        description="Weight units allowed on one line before a forced line break",
    )

    debug_mode: bool = Field(
        default=False,
        description="Log every token and formatter decision",
    )

    # Text printer configuration
    rule_width: int = Field(
        default=80,
        gt=0,
        description="Width in characters of a rendered horizontal rule",
    )

    rule_char: str = Field(
        default="-",
        min_length=1,
        max_length=1,
        description="Character used to draw a horizontal rule",
    )

    ansi_styles: bool = Field(
        default=False,
        description="Render styled text with ANSI escape sequences",
    )

    # Output configuration
    output_file: str = Field(
        default="rendered.txt",
        description="Default output filename (relative to outputdir)",
    )

    def rule_make(self) -> str:
        """
        Build the text of one horizontal rule.

        Example:
            >>> AppSettings(rule_width=5).rule_make()
            '-----'
        """
        return self.rule_char * self.rule_width


# Singleton instance - import this in your code
appsettings = AppSettings()

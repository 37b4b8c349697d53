"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MACROTAGS_ prefix (e.g., MACROTAGS_DEBUG_MODE=true).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use MACROTAGS_ prefix.

    Examples:
        MACROTAGS_HOLDER_CLASS=umb-macro-holder
        MACROTAGS_HTML_ATTRIBUTES='{"data-load-content": "false"}'
        MACROTAGS_FILE_PATTERN=**/*.html
    """

    model_config = SettingsConfigDict(
        env_prefix="MACROTAGS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Editor markup
    holder_class: str = Field(
        default="umb-macro-holder",
        description="CSS class marking a macro placeholder block in editor markup",
    )

    alias_label: str = Field(
        default="Macro alias: ",
        description="Label written before the emphasized alias inside a placeholder block",
    )

    html_attributes: Dict[str, str] = Field(
        default_factory=dict,
        description="Extra attributes added to every placeholder block div (JSON object in env)",
    )

    # Batch conversion
    file_pattern: str = Field(
        default="*.html",
        description="Glob selecting input files, relative to the input directory",
    )

    events_suffix: str = Field(
        default=".events.yaml",
        description="Suffix appended to input file names for scan event dumps",
    )

    debug_mode: bool = Field(
        default=False,
        description="Print tracebacks for conversion failures",
    )

    def htmlAttributes_merge(self, overrides: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """
        Combine configured block attributes with per-call overrides.

        Args:
            overrides: Attributes taking precedence over html_attributes

        Returns:
            New dict; configured keys keep their position, new keys follow

        Example:
            >>> settings = AppSettings(html_attributes={"data-load-content": "false"})
            >>> settings.htmlAttributes_merge({"data-id": "7"})
            {'data-load-content': 'false', 'data-id': '7'}
        """
        merged = dict(self.html_attributes)
        merged.update(overrides or {})
        return merged


# Singleton instance - import this in your code
appsettings = AppSettings()

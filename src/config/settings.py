"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MDPOST_ prefix (e.g., MDPOST_HARD_LINEBREAKS=true).

List settings take JSON arrays (e.g., MDPOST_SKIP_TAGS='["private", "draft"]').

Settings can also be loaded from a .env file in the project root.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Postprocessor chain configuration via environment variables.

    Environment variables use MDPOST_ prefix.

    Examples:
        MDPOST_HARD_LINEBREAKS=true
        MDPOST_ONLY_TAGS='["publish"]'
        MDPOST_VERBOSITY=3
    """

    model_config = SettingsConfigDict(
        env_prefix="MDPOST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Postprocessor selection
    hard_linebreaks: bool = Field(
        default=False,
        description="Convert soft line breaks to hard line breaks (strict line breaks)",
    )

    remove_comments: bool = Field(
        default=True,
        description="Strip %%...%% comment spans outside code blocks",
    )

    remove_toc: bool = Field(
        default=True,
        description="Drop ```toc and ```table-of-contents directive blocks",
    )

    # Tag filtering
    skip_tags: List[str] = Field(
        default_factory=list,
        description="Documents carrying any of these frontmatter tags are skipped",
    )

    only_tags: List[str] = Field(
        default_factory=list,
        description="If non-empty, only documents carrying one of these tags are emitted",
    )

    # Logging
    verbosity: int = Field(
        default=1,
        ge=0,
        description="Logging verbosity (0 silent, 1 normal, 2 per document, 3 per event)",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()

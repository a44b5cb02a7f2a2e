"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MWPREFIX_ prefix (e.g., MWPREFIX_DEFAULT_PREFIX=tw-).

Settings can also be loaded from a .env file in the project root.

These settings configure the command-line harness only. The codemod core
receives its prefix as an explicit argument and never reads them.
"""

from pathlib import PurePath
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.tree import Grammar


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use MWPREFIX_ prefix. List values are JSON.

    Examples:
        MWPREFIX_DEFAULT_PREFIX=tw-
        MWPREFIX_DEFAULT_PATTERN=src/**/*.tsx
        MWPREFIX_SKIP_DIRS='["node_modules", "dist"]'
    """

    model_config = SettingsConfigDict(
        env_prefix="MWPREFIX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Rewrite configuration
    default_prefix: str = Field(
        default="mw-",
        description="Namespace prefix inserted before recognized utility stems",
    )

    # Grammar selection by file extension
    markup_extensions: List[str] = Field(
        default=[".html", ".htm", ".xhtml"],
        description="Extensions lexed with the markup (HTML) grammar",
    )

    typescript_extensions: List[str] = Field(
        default=[".ts", ".tsx", ".mts", ".cts"],
        description="Extensions lexed with the TypeScript + JSX grammar",
    )

    javascript_extensions: List[str] = Field(
        default=[".js", ".jsx", ".mjs", ".cjs"],
        description="Extensions lexed with the JavaScript + JSX grammar",
    )

    # File discovery configuration
    default_pattern: str = Field(
        default="**/*",
        description="Glob (relative to inputdir) selecting candidate files",
    )

    skip_dirs: List[str] = Field(
        default=["node_modules", ".git"],
        description="Directory names never descended into",
    )

    file_encoding: str = Field(
        default="utf-8",
        description="Encoding used to read and write source files",
    )

    def grammar_forPath(self, path: str) -> Grammar:
        """
        Choose the grammar family for a file path from its extension.

        Unknown or missing extensions fall back to JavaScript, matching how
        JSX-capable parsers treat untyped sources.

        Args:
            path: File path or bare file name

        Returns:
            Grammar for the path

        Example:
            >>> settings = AppSettings()
            >>> settings.grammar_forPath("page.html")
            <Grammar.MARKUP: 'markup'>
            >>> settings.grammar_forPath("Button.tsx")
            <Grammar.TYPESCRIPT: 'typescript'>
        """
        suffix = PurePath(path).suffix.lower() if path else ""
        if suffix in self.markup_extensions:
            return Grammar.MARKUP
        if suffix in self.typescript_extensions:
            return Grammar.TYPESCRIPT
        return Grammar.JAVASCRIPT

    def path_isSupported(self, path: str) -> bool:
        """
        Check whether a file has one of the configured source extensions.

        Args:
            path: File path to check

        Returns:
            True if the extension is in any grammar's extension list
        """
        suffix = PurePath(path).suffix.lower()
        return suffix in (
            self.markup_extensions + self.typescript_extensions + self.javascript_extensions
        )


# Singleton instance - import this in your code
appsettings = AppSettings()

"""
Completion settings.

Settings are layered, later sources overriding earlier ones:
1. built-in defaults
2. ``.completionls.yml`` at the workspace root
3. ``initializationOptions`` sent by the client
4. ``workspace/didChangeConfiguration`` payloads

Every source uses the same shape:

    completion:
      addCallParenthesis: true
      addCallArgumentSnippets: false
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml
from lsprotocol.types import ClientCapabilities

from completionls.context.completion_context import CompletionConfig, SnippetCap


CONFIG_FILE_NAME = ".completionls.yml"

# camelCase option key -> Settings attribute
_COMPLETION_OPTIONS: dict[str, str] = {
    "addCallParenthesis": "add_call_parenthesis",
    "addCallArgumentSnippets": "add_call_argument_snippets",
}


class SettingsError(Exception):
    """Raised when a settings source is malformed."""


@dataclass(frozen=True)
class Settings:
    add_call_parenthesis: bool = True
    add_call_argument_snippets: bool = True

    def merge(self, options: Mapping[str, Any] | None) -> Settings:
        """
        Return a copy with ``options`` applied on top.

        Unknown keys are ignored so clients can share one settings
        namespace between servers.

        Raises:
            SettingsError: ``options`` or its ``completion`` section is not
                a mapping, or an option value is not a boolean.
        """
        if options is None:
            return self
        if not isinstance(options, Mapping):
            raise SettingsError(
                f"Settings must be a mapping, got {type(options).__name__}"
            )

        section = options.get("completion")
        if section is None:
            return self
        if not isinstance(section, Mapping):
            raise SettingsError(
                f"'completion' settings must be a mapping, got {type(section).__name__}"
            )

        changes: dict[str, bool] = {}
        for key, attr in _COMPLETION_OPTIONS.items():
            if key not in section:
                continue
            value = section[key]
            if not isinstance(value, bool):
                raise SettingsError(f"completion.{key} must be a boolean, got {value!r}")
            changes[attr] = value

        return replace(self, **changes)

    def completion_config(self, snippet_support: bool) -> CompletionConfig:
        return CompletionConfig(
            add_call_parenthesis=self.add_call_parenthesis,
            add_call_argument_snippets=self.add_call_argument_snippets,
            snippet_cap=SnippetCap.new(snippet_support),
        )


def load_settings_file(workspace_root: Path) -> Mapping[str, Any] | None:
    """
    Read ``.completionls.yml`` from the workspace root.

    Returns None when the file does not exist or is empty.

    Raises:
        SettingsError: the file cannot be read or is not valid YAML.
    """
    config_file = workspace_root / CONFIG_FILE_NAME
    if not config_file.is_file():
        return None

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise SettingsError(f"Cannot load {config_file}: {e}") from e

    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise SettingsError(f"{config_file} must contain a mapping")
    return data


def snippet_support(capabilities: ClientCapabilities | None) -> bool:
    """Whether the client accepts snippet insert text in completion items."""
    if capabilities is None or capabilities.text_document is None:
        return False

    completion = capabilities.text_document.completion
    if completion is None or completion.completion_item is None:
        return False

    return bool(completion.completion_item.snippet_support)

from pathlib import Path
from urllib.parse import unquote, urlparse

from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    WORKSPACE_DID_CHANGE_CONFIGURATION,
    CompletionList,
    CompletionParams,
    DidChangeConfigurationParams,
    InitializeParams,
    LogMessageParams,
    MessageType,
)

from completionls.lsp.capabilities.capabilities import CapabilityManager
from completionls.lsp.completion_language_server import CompletionLanguageServer
from completionls.lsp.settings import (
    Settings,
    SettingsError,
    load_settings_file,
    snippet_support,
)


def _workspace_root(root_uri: str | None) -> Path | None:
    if not root_uri:
        return None
    parsed = urlparse(root_uri)
    if parsed.scheme and parsed.scheme != "file":
        return None
    return Path(unquote(parsed.path))


def _apply_settings(ls: CompletionLanguageServer, options, source: str) -> None:
    """Merge ``options`` into the server settings, logging bad input."""
    try:
        ls.settings = ls.settings.merge(options)
    except SettingsError as e:
        ls.window_log_message(
            LogMessageParams(
                type=MessageType.Error,
                message=f"Ignoring {source} settings: {e}",
            )
        )


def configure(ls: CompletionLanguageServer, params: InitializeParams) -> None:
    """
    Layer settings from the client handshake: defaults, then the workspace
    ``.completionls.yml``, then ``initializationOptions``.
    """
    ls.settings = Settings()
    ls.snippet_support = snippet_support(params.capabilities)

    workspace_root = _workspace_root(params.root_uri)
    if workspace_root is not None:
        try:
            _apply_settings(ls, load_settings_file(workspace_root), "workspace file")
        except SettingsError as e:
            ls.window_log_message(
                LogMessageParams(MessageType.Error, f"Ignoring workspace settings: {e}")
            )

    _apply_settings(ls, params.initialization_options, "initialization")

    ls.window_log_message(
        LogMessageParams(
            MessageType.Info,
            f"Completion settings: {ls.settings} (snippets: {ls.snippet_support})",
        )
    )


def create_server() -> CompletionLanguageServer:
    """
    Creates and returns a configured Language Server instance.

    The LanguageServer class from pygls handles:
    - JSON-RPC communication with clients (editors)
    - Request/response lifecycle
    - Notifications and event handling
    """
    server = CompletionLanguageServer("completionls", "0.1.0")

    @server.feature("initialize")
    async def initialize(ls: CompletionLanguageServer, params: InitializeParams):
        """
        Initialize settings and capabilities from the client handshake.
        """
        configure(ls, params)

        # Initialize capability manager
        ls.capability_manager = CapabilityManager(ls)
        ls.capability_manager.register_all()

    @server.feature(WORKSPACE_DID_CHANGE_CONFIGURATION)
    async def did_change_configuration(
        ls: CompletionLanguageServer, params: DidChangeConfigurationParams
    ):
        _apply_settings(ls, params.settings, "client")

    # Register aggregated handlers
    @server.feature(TEXT_DOCUMENT_COMPLETION)
    async def completion(ls: CompletionLanguageServer, params: CompletionParams):
        if ls.capability_manager:
            return await ls.capability_manager.handle_completion(params)
        return CompletionList(is_incomplete=False, items=[])

    return server

from pygls.lsp.server import LanguageServer

from completionls.context.completion_context import CompletionConfig
from completionls.lsp.capabilities.capabilities import CandidateProvider, CapabilityManager
from completionls.lsp.settings import Settings


class CompletionLanguageServer(LanguageServer):
    """
    Language Server rendering resolved candidates as completion items.

    Attributes:
        settings: Current completion settings (defaults, file, client)
        snippet_support: Whether the client accepts snippet insert text
        candidate_provider: Resolution engine feeding candidates, if any
    """

    def __init__(self, name: str, version: str):
        super().__init__(name, version)

        self.settings: Settings = Settings()
        self.snippet_support: bool = False
        self.candidate_provider: CandidateProvider | None = None
        self.capability_manager: CapabilityManager | None = None

    def completion_config(self) -> CompletionConfig:
        """Snapshot of the configuration for one completion request."""
        return self.settings.completion_config(self.snippet_support)

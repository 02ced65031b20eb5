"""
Completion capability backed by the candidate renderer.

Asks the registered CandidateProvider for the candidates at the cursor,
renders them through a fresh Completions accumulator and returns them
ranked for the client.
"""

from lsprotocol.types import (
    CompletionList,
    CompletionParams,
    LogMessageParams,
    MessageType,
)

from completionls.completion.presentation import Completions
from completionls.lsp.capabilities.capabilities import CompletionCapability
from completionls.lsp.conversion import rank_items


class RenderedCompletionCapability(CompletionCapability):
    """Provides completions for resolved semantic candidates."""

    @property
    def name(self) -> str:
        return "rendered_completion"

    @property
    def description(self) -> str:
        return "Render resolved candidates as ranked completion items"

    async def can_handle(self, params: CompletionParams) -> bool:
        """Only useful once a resolution engine is plugged in."""
        return self.server.candidate_provider is not None

    async def complete(self, params: CompletionParams) -> CompletionList:
        provider = self.server.candidate_provider
        if provider is None:
            return CompletionList(is_incomplete=False, items=[])

        config = self.server.completion_config()
        acc = Completions()
        await provider.provide(params, config, acc)

        self.server.window_log_message(
            LogMessageParams(
                type=MessageType.Log,
                message=f"Rendered {len(acc)} completion items for "
                        f"{params.text_document.uri}:{params.position.line}",
            )
        )

        return CompletionList(is_incomplete=False, items=rank_items(acc))

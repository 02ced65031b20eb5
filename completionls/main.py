"""
Main entry point for the completion Language Server.

This file is executed when running: python -m completionls

The server communicates with editors via stdin/stdout using JSON-RPC.
"""
import os

from completionls.lsp.server import create_server


def main():
    """Start the language server on stdin/stdout."""

    # Check if we're in debug mode
    if os.getenv("DEBUG"):
        import debugpy

        debugpy.listen(("127.0.0.1", 5678))
        debugpy.wait_for_client()

    server = create_server()

    # Start the server - it will listen on stdin/stdout for LSP messages
    # from the editor client
    server.start_io()


if __name__ == "__main__":
    main()

"""
Main entry point for the completion Language Server.

This file is executed when running: python -m completionls
"""
from completionls.main import main

if __name__ == "__main__":
    main()

"""
Backend package for the chat relay service.

This package contains the relay components including:
- Flask application and API routes
- User identity registration against the chat platform and the local store
- Conversation context assembly and LLM completion
- Relational storage of chat exchanges
- Configuration and logging setup
"""

import logging
import os

# Configure logging with clickable paths before anything else imports logging
logging.basicConfig(
    level=logging.INFO, format="%(levelname)s: %(pathname)s:%(lineno)d %(message)s"
)


class ClickablePathFilter(logging.Filter):
    """Filter to make file paths clickable in the terminal."""

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "pathname"):
            # Convert absolute path to relative path from workspace root
            workspace_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
            try:
                record.pathname = os.path.relpath(record.pathname, workspace_root)
            except ValueError:
                # Different drive on Windows
                pass
        return True


logging.getLogger().addFilter(ClickablePathFilter())

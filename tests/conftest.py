"""Root pytest configuration for all tests."""

import logging

# notion-client logs every request at DEBUG/WARNING; keep test output quiet.
logging.getLogger("notion_client").setLevel(logging.ERROR)
logging.getLogger("httpx").setLevel(logging.WARNING)

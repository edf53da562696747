# vault_server/main.py
import logging
import sys

from fastmcp import FastMCP
from pydantic import ValidationError

from vault.config import Settings
from vault.di import build_container
from vault.logging import configure_logging
from vault_server.tools.files import register_file_tools

logger = logging.getLogger(__name__)


def create_mcp(settings: Settings | None = None) -> FastMCP:
    """
    Stdio MCP host over the vault rooted at settings.WORK_FOLDER
    (loaded from the environment when not given).
    """
    container = build_container(settings)

    mcp = FastMCP("ObsidianManager", version="1.0.0")
    register_file_tools(mcp, container.file_service)
    return mcp


def main():
    try:
        settings = Settings()
    except ValidationError as e:
        configure_logging()
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    configure_logging(settings.LOG_LEVEL)
    app = create_mcp(settings)
    # stdio transport: client (agent/IDE) launches this process and speaks JSON-RPC on stdin/stdout
    app.run(transport="stdio")


if __name__ == "__main__":
    main()

from pathlib import Path

import pytest
from fastmcp.exceptions import ToolError

from vault.services.files import FileService
from vault.services.paths import PathConfiner
from vault.services.templates import TemplateEngine
from vault_server.tools.files import (
    FileDeleteIn,
    FileMoveIn,
    FileReadIn,
    FileWriteIn,
    register_file_tools,
)


class RecordingMCP:
    """Stands in for FastMCP's decorator API and keeps the registered functions."""

    def __init__(self):
        self.tools = {}

    def tool(self, name, description):
        def deco(fn):
            self.tools[name] = fn
            return fn
        return deco


@pytest.fixture
def tools(tmp_path: Path):
    mcp = RecordingMCP()
    register_file_tools(mcp, FileService(PathConfiner(tmp_path), TemplateEngine()))
    return mcp.tools


def test_all_file_tools_registered(tools):
    assert set(tools) == {"file_read", "file_write", "file_move", "file_delete"}


def test_tools_round_trip(tools, tmp_path: Path):
    out = tools["file_write"](FileWriteIn(filePath="a/n.md", content="{{ who }}"))
    assert out == {"success": True, "message": "File written successfully"}
    assert tools["file_read"](FileReadIn(filePath="a/n.md")) == {"content": "{{ who }}", "variables": ["who"]}

    tools["file_move"](FileMoveIn(sourcePath="a/n.md", destinationPath="b/n.md"))
    assert (tmp_path / "b/n.md").exists()

    out = tools["file_delete"](FileDeleteIn(filePath="b/n.md"))
    assert out["message"] == "File and empty folder deleted successfully"


def test_tool_failure_raises_tool_error(tools):
    with pytest.raises(ToolError, match="Failed to read file"):
        tools["file_read"](FileReadIn(filePath="missing.md"))
    with pytest.raises(ToolError, match="Either content or templatePath is required"):
        tools["file_write"](FileWriteIn(filePath="x.md"))

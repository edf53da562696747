# vault_server/tools/files.py
from __future__ import annotations
from typing import Dict, List, Optional
from pydantic import BaseModel, Field
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError


class FileReadIn(BaseModel):
    filePath: str = Field(..., description="Path to the file to be read")


class FileWriteIn(BaseModel):
    filePath: str = Field(..., description="Path to the file to be written")
    content: Optional[str] = Field(None, description="Content to write to the file")
    templatePath: Optional[str] = Field(None, description="Path to a template file")
    append: bool = Field(
        False, description="Whether to append to the file instead of overwriting"
    )
    variables: Optional[Dict[str, str]] = Field(
        None, description="Variables to replace in the template"
    )


class FileMoveIn(BaseModel):
    sourcePath: str = Field(..., description="Path of the file to be moved")
    destinationPath: str = Field(..., description="Destination path for the file")


class FileDeleteIn(BaseModel):
    filePath: str = Field(..., description="Path of the file to be deleted")


class FileContentOut(BaseModel):
    content: str = Field(..., description="Content of the file")
    variables: List[str] = Field(..., description="List of variables found in the file")


class SuccessOut(BaseModel):
    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Success message")


class ErrorOut(BaseModel):
    error: str = Field(..., description="Error message")


def _unwrap(result):
    if not result.ok:
        raise ToolError(result.error)
    return result.payload


def register_file_tools(mcp: FastMCP, file_service):
    """
    Expose the vault file operations as MCP tools. Each tool hands its
    parsed input to the FileService and returns the same payload the HTTP
    routes send; a failed operation becomes a ToolError carrying the
    generic message, never the OS detail.
    """

    @mcp.tool(
        name="file_read",
        description="Read a vault file and list the {{ variables }} it contains",
    )
    def file_read(input: FileReadIn) -> Dict:
        return _unwrap(file_service.read(input.filePath))

    @mcp.tool(
        name="file_write",
        description="Write or append to a vault file, optionally from a template " \
        "with variable replacement",
    )
    def file_write(input: FileWriteIn) -> Dict:
        return _unwrap(
            file_service.write(
                input.filePath,
                content=input.content,
                template_path=input.templatePath,
                append=input.append,
                variables=input.variables,
            )
        )

    @mcp.tool(name="file_move", description="Move a vault file to another location")
    def file_move(input: FileMoveIn) -> Dict:
        return _unwrap(file_service.move(input.sourcePath, input.destinationPath))

    @mcp.tool(
        name="file_delete",
        description="Delete a vault file and its parent folder if it becomes empty",
    )
    def file_delete(input: FileDeleteIn) -> Dict:
        return _unwrap(file_service.delete(input.filePath))

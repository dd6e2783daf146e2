"""Pydantic schemas for JSON output.

All --json output from CLI commands uses these models so the structure is
the same for every command:

- show: ShowResponse (one FileTags entry per input file)
- config: ConfigResponse | ErrorResponse
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response.

    Attributes:
        status: Always "error" for error responses
        error: Machine-readable error code (e.g., "invalid_config")
        message: Human-readable error message
    """

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=["invalid_input", "invalid_config"],
    )
    message: str = Field(description="Human-readable error description")


class FileTags(BaseModel):
    """Tags read from one file, or the reason they could not be read.

    Attributes:
        path: Path of the file as given on the command line
        status: "ok" when the file was parsed
        format: Detected container family (RIFF or ID3v1)
        tags: Field name -> value, in stream order
        error: Exception class name when parsing failed
        message: Error message when parsing failed
    """

    path: str = Field(description="Path of the input file")
    status: Literal["ok", "error"]
    format: Optional[str] = Field(default=None, description="Detected container family")
    tags: Optional[Dict[str, str]] = Field(default=None, description="Decoded tags")
    error: Optional[str] = Field(default=None, description="Error type")
    message: Optional[str] = Field(default=None, description="Error description")


class ShowResponse(BaseModel):
    """Response for the show command.

    Attributes:
        status: "success" if every file was read, else "completed_with_errors"
        files: One entry per input file, in command line order
    """

    status: Literal["success", "completed_with_errors"]
    files: List[FileTags]


class ConfigResponse(BaseModel):
    """Response for the config command."""

    status: Literal["success"] = "success"
    config_path: str = Field(description="Path of the configuration file")
    config: Dict[str, Any] = Field(description="Effective configuration")

"""
API routes for the component formatter.
"""
from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from typing import Any, Optional

from infrastructure import EnvironmentSettings
from services.format_service import FormattingService


router = APIRouter(prefix="/api")

# Singleton service, created in main.py and attached here
_service: Optional[FormattingService] = None


def init_service(svc: FormattingService) -> None:
    global _service
    _service = svc


def svc() -> FormattingService:
    if _service is None:
        raise RuntimeError("FormattingService not initialized")
    return _service


# ------------------------------------------------------------------
# Request / response models
# ------------------------------------------------------------------

class SettingsModel(BaseModel):
    """Editor-level settings forwarded by the host."""
    prettier: dict[str, Any] = Field(default_factory=dict)
    html_format: dict[str, Any] = Field(default_factory=dict)

    def to_environment(self) -> EnvironmentSettings:
        return EnvironmentSettings(prettier=self.prettier, html_format=self.html_format)


class FormatTextRequest(BaseModel):
    text: str
    project_root: Optional[str] = None
    settings: Optional[SettingsModel] = None


class FormatFileRequest(BaseModel):
    file_path: str
    project_root: Optional[str] = None
    write: bool = False


class EditModel(BaseModel):
    start_line: int
    end_line: int
    replacement_text: str


class FormatTextResponse(BaseModel):
    edits: list[EditModel]
    text: str
    changed: bool


class FormatFileResponse(BaseModel):
    file_path: str
    edits: list[EditModel]
    changed: bool
    written: bool


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.post("/format", response_model=FormatTextResponse)
def format_text(req: FormatTextRequest):
    """Format component source text and return the edits to apply."""
    settings = req.settings.to_environment() if req.settings else None
    try:
        return svc().format_text(req.text, req.project_root, settings)
    except Exception as e:
        raise HTTPException(500, str(e))


@router.post("/format/file", response_model=FormatFileResponse)
def format_file(req: FormatFileRequest):
    """Format a component file on disk, optionally writing it back."""
    try:
        return svc().format_file(req.file_path, req.project_root, req.write)
    except FileNotFoundError:
        raise HTTPException(404, f"File not found: {req.file_path}")
    except Exception as e:
        raise HTTPException(500, str(e))


@router.get("/options")
def get_options(project_root: Optional[str] = None):
    """Return the options a pass would use for *project_root*."""
    return svc().serialize_options(svc().resolve_options(project_root))

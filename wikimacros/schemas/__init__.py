from wikimacros.schemas.schemas import (
    AttachmentResponse,
    MacroInfo,
    PageCreate, PageResponse,
    RenderRequest, RenderResponse,
    CONTENT_FORMATS,
)

__all__ = [
    "AttachmentResponse",
    "MacroInfo",
    "PageCreate", "PageResponse",
    "RenderRequest", "RenderResponse",
    "CONTENT_FORMATS",
]

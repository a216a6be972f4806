"""Live preview endpoint for the editor dashboard."""

from fastapi import APIRouter, HTTPException

from inkwell.models.content import RenderRequest, RenderResponse
from inkwell.services.renderer import MalformedInput, render_markup

router = APIRouter(prefix="/render", tags=["render"])


@router.post("", response_model=RenderResponse)
async def preview_markup(request: RenderRequest):
    """Render draft markup into content nodes without saving anything."""
    try:
        nodes = render_markup(request.body)
    except MalformedInput as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return RenderResponse(nodes=nodes)

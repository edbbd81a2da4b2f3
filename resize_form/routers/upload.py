from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import HTMLResponse
from typing import Optional
from resize_form.services.resize_client import ResizeClient
from resize_form.services.upload_pipeline import UploadPipeline
from resize_form.ui.dom import FormControls, ResultContainer, SubmitEvent
from resize_form.ui.form_handler import UploadForm
import structlog

logger = structlog.get_logger()
router = APIRouter(tags=["upload"])

# The page's single result area, shared by every submission
result_container = ResultContainer()

PAGE_TEMPLATE = """
<html><body>
<h3>Image resize</h3>
<form id="image-resize-form" action="/" method="post" enctype="multipart/form-data">
  <input type="file" id="image" name="image" accept="image/*">
  <input type="text" id="width" name="width" placeholder="Width">
  <input type="text" id="height" name="height" placeholder="Height">
  <button type="submit">Upload</button>
</form>
{container}
</body></html>
"""


def render_page(container: ResultContainer) -> str:
    return PAGE_TEMPLATE.format(container=container.render())


def get_upload_form() -> UploadForm:
    pipeline = UploadPipeline(client=ResizeClient(), container=result_container)
    return UploadForm(pipeline)


@router.get("/", response_class=HTMLResponse)
async def show_form(form: UploadForm = Depends(get_upload_form)):
    """Render the resize form together with the current result area."""
    return HTMLResponse(render_page(form.container))


@router.post("/", response_class=HTMLResponse)
async def submit_form(
    image: Optional[UploadFile] = File(None),
    width: str = Form(""),
    height: str = Form(""),
    form: UploadForm = Depends(get_upload_form)
):
    """
    Handle a submission of the resize form.

    The page is re-rendered whatever the outcome; a failed upload leaves
    the result area as it was.

    Args:
        image: Selected image, absent or unnamed when no file was chosen
        width: Requested width, forwarded verbatim
        height: Requested height, forwarded verbatim
        form: The upload form handling the submission
    """
    # An empty file input still posts a part, with no filename
    if image is not None and not image.filename:
        image = None

    logger.info(
        "Resize form submitted",
        file_name=image.filename if image else None,
        width=width,
        height=height
    )

    controls = FormControls(image=image, width=width, height=height)
    await form.handle_submit(SubmitEvent(), controls)
    return HTMLResponse(render_page(form.container))

import base64
from typing import Optional
from resize_form.exceptions import EncodingFailure
from resize_form.schemas.upload import EncodedPayload
import structlog

logger = structlog.get_logger()

DEFAULT_MIME_TYPE = "application/octet-stream"


async def read_as_data_url(selected_file) -> str:
    """
    Read a selected file and return its contents as a base64 data URL.

    Args:
        selected_file: Object exposing ``filename``, ``content_type`` and an
            awaitable ``read()`` (Starlette's UploadFile fits)

    Returns:
        Data URL of the form ``data:<mime>;base64,<body>``

    Raises:
        EncodingFailure: If the file could not be read
    """
    try:
        data = await selected_file.read()
    except Exception as e:
        logger.warning(
            "Failed to read selected file",
            error=str(e),
            file_name=getattr(selected_file, "filename", None)
        )
        raise EncodingFailure(f"Failed to read file: {str(e)}") from e

    mime_type = selected_file.content_type or DEFAULT_MIME_TYPE
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def strip_data_url_prefix(data_url: str) -> str:
    """Return the base64 body of a data URL, without its ``data:...,`` prefix."""
    prefix, separator, body = data_url.partition(",")
    if not separator or not prefix.startswith("data:"):
        raise EncodingFailure("Not a data URL")
    return body


async def encode_selected_file(selected_file: Optional[object]) -> EncodedPayload:
    """
    Build the upload payload for the selected file.

    No file selected yields a payload whose ``file`` is None and whose
    file metadata is unset.
    """
    if selected_file is None:
        return EncodedPayload(file=None)

    data_url = await read_as_data_url(selected_file)
    payload = EncodedPayload(
        fileName=selected_file.filename,
        contentType=selected_file.content_type or "",
        file=strip_data_url_prefix(data_url)
    )

    logger.debug(
        "Encoded selected file",
        file_name=payload.fileName,
        content_type=payload.contentType,
        encoded_length=len(payload.file)
    )
    return payload

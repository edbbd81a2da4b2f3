class PipelineError(Exception):
    """Base class for failures raised while processing an upload submission."""


class EncodingFailure(PipelineError):
    """The selected file could not be read or transcoded to base64."""


class UploadFailed(PipelineError):
    """The resize service answered with a non-success HTTP status."""

    def __init__(self, status_text: str):
        self.status_text = status_text
        super().__init__(f"Upload failed: {status_text}")


class MalformedResponse(PipelineError):
    """The response body was not JSON or lacked the resized image URL."""

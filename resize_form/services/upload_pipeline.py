from enum import Enum
from typing import Optional
from resize_form.config import settings
from resize_form.schemas.upload import UploadRequestParams, UploadResult
from resize_form.services.file_reader import encode_selected_file
from resize_form.services.resize_client import ResizeClient
from resize_form.ui.dom import Anchor, FormControls, ResultContainer, SubmitEvent
import structlog

logger = structlog.get_logger()


class SubmissionState(str, Enum):
    IDLE = "idle"
    ENCODING = "encoding"
    REQUESTING = "requesting"
    DONE = "done"
    FAILED = "failed"


class SubmissionOutcome:
    """Result of one submission: either an upload result or the error that stopped it."""

    def __init__(
        self,
        state: SubmissionState,
        result: Optional[UploadResult] = None,
        error: Optional[Exception] = None
    ):
        self.state = state
        self.result = result
        self.error = error

    @property
    def ok(self) -> bool:
        return self.state == SubmissionState.DONE

    @classmethod
    def success(cls, result: UploadResult) -> "SubmissionOutcome":
        return cls(SubmissionState.DONE, result=result)

    @classmethod
    def failure(cls, error: Exception) -> "SubmissionOutcome":
        return cls(SubmissionState.FAILED, error=error)


class UploadPipeline:
    """
    Turns one form submission into one request to the resize service.

    The pipeline reads the form controls when submitted, encodes the
    selected file, posts it and renders the returned URL into the result
    container. Each submission is independent; concurrent submissions are
    neither serialized nor deduplicated, so the last one to complete wins.
    """

    def __init__(
        self,
        client: ResizeClient,
        container: ResultContainer,
        link_href: Optional[str] = None
    ):
        self.client = client
        self.container = container
        self.link_href = link_href if link_href is not None else settings.result_link_href

    async def submit(self, event: SubmitEvent, controls: FormControls) -> SubmissionOutcome:
        """
        Process a submission event.

        Args:
            event: The triggering submit event; its default action is suppressed
            controls: Form controls read at the moment of submission

        Returns:
            SubmissionOutcome describing success or the failure that aborted it
        """
        event.prevent_default()

        selected_file = controls.image
        params = UploadRequestParams(width=controls.width, height=controls.height)
        state = SubmissionState.IDLE

        try:
            state = SubmissionState.ENCODING
            logger.debug("Submission state changed", state=state.value)
            payload = await encode_selected_file(selected_file)

            state = SubmissionState.REQUESTING
            logger.debug("Submission state changed", state=state.value)
            result = await self.client.upload(payload, params)

            self.render_result(result)
        except Exception as e:
            logger.debug(
                "Submission aborted",
                state=state.value,
                error_type=type(e).__name__
            )
            return SubmissionOutcome.failure(e)

        logger.info(
            "Upload completed",
            width=params.width,
            height=params.height,
            resized_image_url=result.resizedImageUrl
        )
        return SubmissionOutcome.success(result)

    def render_result(self, result: UploadResult):
        # Link text is the resized image URL; the target stays the configured href
        link = Anchor(href=self.link_href, text=result.resizedImageUrl)
        self.container.clear()
        self.container.append_child(link)

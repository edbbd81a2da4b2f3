from resize_form.services.upload_pipeline import SubmissionOutcome, UploadPipeline
from resize_form.ui.dom import FormControls, ResultContainer, SubmitEvent
import structlog

logger = structlog.get_logger()


class UploadForm:
    """
    The resize form as seen by the page: controls in, result container out.

    ``handle_submit`` is the single error boundary of a submission. Failures
    are logged and never shown; the result container keeps its prior content.
    """

    def __init__(self, pipeline: UploadPipeline):
        self.pipeline = pipeline

    @property
    def container(self) -> ResultContainer:
        return self.pipeline.container

    async def handle_submit(self, event: SubmitEvent, controls: FormControls) -> SubmissionOutcome:
        try:
            outcome = await self.pipeline.submit(event, controls)
        except Exception as e:
            outcome = SubmissionOutcome.failure(e)

        if not outcome.ok:
            logger.error(
                "Error uploading image",
                error=str(outcome.error),
                error_type=type(outcome.error).__name__,
                width=controls.width,
                height=controls.height
            )

        return outcome

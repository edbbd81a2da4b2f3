from typing import Optional
import httpx
from resize_form.config import settings
from resize_form.exceptions import MalformedResponse, UploadFailed
from resize_form.schemas.upload import EncodedPayload, UploadRequestParams, UploadResult
import structlog

logger = structlog.get_logger()


class ResizeClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url if base_url is not None else settings.resize_api_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.transport = transport

    def build_upload_url(self, params: UploadRequestParams) -> str:
        """
        Build the upload endpoint URL.

        Width and height are embedded exactly as given; empty or
        non-numeric values are forwarded untouched.
        """
        return f"{self.base_url}/upload?width={params.width}&height={params.height}"

    async def upload(self, payload: EncodedPayload, params: UploadRequestParams) -> UploadResult:
        """
        POST the encoded payload to the resize service.

        Args:
            payload: Encoded file and its metadata
            params: Requested width and height

        Returns:
            Parsed upload result carrying the resized image URL

        Raises:
            UploadFailed: If the service answers with a non-success status
            MalformedResponse: If the success body cannot be parsed
            httpx.HTTPError: If the request itself could not be completed
        """
        url = self.build_upload_url(params)

        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            follow_redirects=True
        ) as client:
            response = await client.post(url, content=payload.to_json())

        logger.info(
            "Resize service responded",
            url=url,
            status_code=response.status_code
        )

        if not response.is_success:
            raise UploadFailed(response.reason_phrase)

        try:
            return UploadResult.model_validate(response.json())
        except ValueError as e:
            raise MalformedResponse(f"Unexpected response body: {str(e)}") from e

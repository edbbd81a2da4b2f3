import io
import json
import pytest
import httpx
from fastapi.testclient import TestClient
from starlette.datastructures import Headers, UploadFile
from resize_form.main import app
from resize_form.routers.upload import get_upload_form
from resize_form.services.resize_client import ResizeClient
from resize_form.services.upload_pipeline import UploadPipeline
from resize_form.ui.dom import ResultContainer
from resize_form.ui.form_handler import UploadForm

TEST_API_URL = "https://resize.test/dev"
TEST_LINK_HREF = "https://www.google.com"
RESIZED_IMAGE_URL = "https://cdn.example/out.jpg"


class ResizeServiceStub:
    """Stands in for the remote resize service: records requests, returns a canned response."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = {"resizedImageUrl": RESIZED_IMAGE_URL}
        self.error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last_body(self):
        return json.loads(self.requests[-1].content)


def make_upload_file(data: bytes, filename: str = "a.png", content_type: str = "image/png") -> UploadFile:
    return UploadFile(
        file=io.BytesIO(data),
        filename=filename,
        headers=Headers({"content-type": content_type})
    )


@pytest.fixture
def resize_service():
    return ResizeServiceStub()


@pytest.fixture
def resize_client(resize_service):
    return ResizeClient(
        base_url=TEST_API_URL,
        transport=httpx.MockTransport(resize_service.handler)
    )


@pytest.fixture
def result_container():
    return ResultContainer()


@pytest.fixture
def pipeline(resize_client, result_container):
    return UploadPipeline(
        client=resize_client,
        container=result_container,
        link_href=TEST_LINK_HREF
    )


@pytest.fixture
def upload_form(pipeline):
    return UploadForm(pipeline)


@pytest.fixture(scope="function")
def client(upload_form):
    app.dependency_overrides[get_upload_form] = lambda: upload_form
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def png_bytes():
    # 10 bytes: PNG signature plus two padding bytes
    return b"\x89PNG\r\n\x1a\n\x00\x01"


@pytest.fixture
def sample_image(png_bytes):
    return make_upload_file(png_bytes)


@pytest.fixture
def upload_file_factory():
    return make_upload_file

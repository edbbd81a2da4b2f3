from pydantic import BaseModel
from typing import Any, Dict, Optional
import json


class UploadRequestParams(BaseModel):
    # Forwarded verbatim as query parameters, never validated
    width: str = ""
    height: str = ""


class EncodedPayload(BaseModel):
    fileName: Optional[str] = None
    contentType: Optional[str] = None
    file: Optional[str] = None  # bare base64 body, None when no file was selected

    def to_wire(self) -> Dict[str, Any]:
        """
        Build the request body the way JSON.stringify would.

        Missing file metadata is left out of the body entirely while
        ``file`` is always sent, as ``null`` when no file was selected.
        """
        body: Dict[str, Any] = {}
        if self.fileName is not None:
            body["fileName"] = self.fileName
        if self.contentType is not None:
            body["contentType"] = self.contentType
        body["file"] = self.file
        return body

    def to_json(self) -> str:
        return json.dumps(self.to_wire(), separators=(",", ":"))


class UploadResult(BaseModel):
    resizedImageUrl: str

import base64
import binascii
from typing import Any, Literal

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from mediaforge.gateway.deps import Storage

router = APIRouter(prefix="/api", tags=["Files"])


class UploadFileRequest(BaseModel):
    file: str
    file_name: str = Field(alias="fileName", min_length=1)
    encoding: Literal["utf-8", "base64"] = "utf-8"

    model_config = ConfigDict(populate_by_name=True)

    def body(self) -> bytes:
        if self.encoding == "base64":
            return base64.b64decode(self.file, validate=True)
        return self.file.encode("utf-8")


@router.post("/upload-file")
async def upload_file(request: UploadFileRequest, storage: Storage) -> dict[str, Any]:
    """Upload a file to object storage under `fileName`."""
    try:
        body = request.body()
    except binascii.Error:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="file is not valid base64")
    return await storage.upload(request.file_name, body)

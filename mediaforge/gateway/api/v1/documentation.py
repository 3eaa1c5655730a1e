from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from mediaforge.gateway.deps import DocService

router = APIRouter(prefix="/api", tags=["Documentation"])


class GenerateDocumentationRequest(BaseModel):
    description: str = Field(min_length=1)


@router.post("/generate-documentation")
async def generate_documentation(request: GenerateDocumentationRequest, service: DocService) -> dict[str, Any]:
    return await service.generate(request.description)

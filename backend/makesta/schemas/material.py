"""Material Schemas — listing/detail response with the uploader nested.

The create request is multipart form data, validated in the route.
"""

from datetime import datetime

from makesta.schemas.base import CamelModel, UserSummary, summarize


class MaterialResponse(CamelModel):
    id: int
    title: str
    description: str | None = None
    file_name: str | None = None
    file_size: int | None = None
    download_count: int
    uploaded_by: int
    created_at: datetime | None = None
    uploader: UserSummary | None = None

    @classmethod
    def from_owned(cls, row) -> "MaterialResponse":
        resp = cls.model_validate(row.entity)
        resp.uploader = summarize(row.owner)
        return resp

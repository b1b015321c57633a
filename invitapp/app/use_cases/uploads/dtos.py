from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UploadGrantResponse(BaseModel):
    """Pre-signed write grant for one object"""

    model_config = ConfigDict(populate_by_name=True)

    url: str
    key: str
    public_url: str = Field(..., alias="publicUrl")
    expires_in: int = Field(..., alias="expiresIn")
    expires_at: datetime = Field(..., alias="expiresAt")

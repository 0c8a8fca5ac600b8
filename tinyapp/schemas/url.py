from pydantic import BaseModel, Field, computed_field, ConfigDict
from datetime import datetime
from tinyapp.config import settings


class URLBase(BaseModel):
    # Plain str: validation is done by the URL store so bad input gets a 400, not a 422
    long_url: str = Field(..., description="The original URL to be shortened")


class URLCreate(URLBase):
    pass


class URLUpdate(URLBase):
    pass


class URLResponse(URLBase):
    """Response schema that serializes a ShortURL entry

    - from_attributes=True reads straight from the model attributes
    - @computed_field creates derived fields
    """
    id: str
    visit_count: int
    created_at: datetime

    @computed_field
    @property
    def short_url(self) -> str:
        """Computed field - the public redirect link"""
        return f"{settings.base_url}/u/{self.id}"

    model_config = ConfigDict(from_attributes=True)


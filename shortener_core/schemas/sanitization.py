from pydantic import BaseModel, ConfigDict, Field
from typing import List


class SanitizationResult(BaseModel):
    """Outcome of stripping tracking parameters from a URL

    If nothing was removed, `clean_url` is exactly `url`.
    """
    url: str = Field(..., description="The URL as it was supplied")
    is_dirty: bool = Field(..., description="True if any tracking parameter was found")
    tracking_params: List[str] = Field(
        default_factory=list,
        description="Removed keys in order of appearance, duplicates kept"
    )
    clean_url: str = Field(..., description="The URL without tracking parameters")

    model_config = ConfigDict(frozen=True)

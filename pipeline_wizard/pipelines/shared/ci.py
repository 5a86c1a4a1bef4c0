"""Corporate identity block (brand assets, colours, fonts)."""

from typing import Annotated, List, Literal, Optional

from pydantic import AfterValidator, Field, StringConstraints

from ...engine.model import ConfigModel

MAX_FILE_SIZE = 5 * 1024 * 1024
MAX_BRAND_COLORS = 20
MAX_BRAND_NOTE_LENGTH = 2000
MAX_FONT_NAME_LENGTH = 100
MAX_URL_LENGTH = 500
# sum of the per-category upload limits
MAX_ASSETS = 23

AssetCategory = Literal['logo', 'letterhead', 'font', 'pptx-master', 'style-example', 'other']

HexColor = Annotated[str, StringConstraints(pattern=r'^#[0-9a-fA-F]{6}$')]


def _check_preview(value: str) -> str:
    """Only raster image data URLs are accepted."""
    if not value.startswith("data:image/") or value.startswith("data:image/svg"):
        raise ValueError("preview must be a non-SVG image data URL")
    return value


ImagePreview = Annotated[str, StringConstraints(max_length=1_000_000), AfterValidator(_check_preview)]


class CIAsset(ConfigModel):
    """An uploaded brand asset (metadata only, plus an optional preview)."""

    id: str = Field(..., max_length=64)
    category: AssetCategory
    file_name: str = Field(..., max_length=255)
    file_type: str = Field(..., max_length=100)
    file_size: int = Field(..., ge=0, le=MAX_FILE_SIZE)
    preview: Optional[ImagePreview] = None


class CIConfig(ConfigModel):
    assets: List[CIAsset] = Field(default_factory=list, max_length=MAX_ASSETS)
    brand_colors: List[HexColor] = Field(default_factory=list, max_length=MAX_BRAND_COLORS)
    font_primary: str = Field('', max_length=MAX_FONT_NAME_LENGTH)
    font_secondary: str = Field('', max_length=MAX_FONT_NAME_LENGTH)
    brand_url: str = Field('', max_length=MAX_URL_LENGTH)
    brand_notes: str = Field('', max_length=MAX_BRAND_NOTE_LENGTH)

"""Licensed asset models."""

from typing import Any

from pydantic import BaseModel, Field


class AssetMetadata(BaseModel):
    """Descriptive metadata stored alongside a licensed file."""

    title: str = ""
    description: str = ""
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)


class LicensedAsset(BaseModel):
    """Outcome of a licensing request for one image."""

    id: str
    url: str | None = None
    extension: str = ""
    metadata: AssetMetadata = Field(default_factory=AssetMetadata)
    errors: list[str] = Field(default_factory=list)

    @property
    def is_downloadable(self) -> bool:
        return bool(self.url)

    def to_host_dict(self) -> dict[str, Any]:
        """Shape expected by the host's file import pipeline."""
        return {
            "url": self.url,
            "extension": self.extension,
            "metadata": self.metadata.model_dump(),
            "errors": list(self.errors),
        }

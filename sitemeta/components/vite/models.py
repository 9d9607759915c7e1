"""
Vite component models.

Spec of the build manifest: ``{entry: {file, css?, imports?}}``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ManifestEntry(BaseModel):
    """One record of the Vite build manifest, keyed by source entry path."""

    file: str
    css: tuple[str, ...] = ()
    imports: tuple[str, ...] = ()
    src: str | None = None
    is_entry: bool = Field(default=False, alias="isEntry")

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


ManifestAdapter: TypeAdapter[dict[str, ManifestEntry]] = TypeAdapter(dict[str, ManifestEntry])

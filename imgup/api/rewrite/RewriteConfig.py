"""Rewrite behaviour configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RewriteConfig(BaseModel):
    """How references are renamed and rewritten after an upload."""

    model_config = ConfigDict(extra="forbid")

    image_desc: Literal["origin", "none", "removeDefault"] = Field(
        "origin", description="Display text policy for rewritten references"
    )
    image_size_suffix: str = Field("", description="Appended to display text, e.g. '|300'")
    delete_source: bool = Field(False, description="Trash local images after their references are rewritten")
    allowed_code_types: list[str] = Field(
        default_factory=lambda: ["ad-quote"],
        description="Fenced code block tags whose image links are rewritten",
    )
    overlap_policy: Literal["document", "batch"] = Field(
        "document", description="Exclude only the conflicting note, or abort the whole batch"
    )
    work_on_network: bool = Field(False, description="Re-upload network images found in notes")
    network_black_domains: str = Field("", description="Comma-separated hosts never re-uploaded")
    check_freshness: bool = Field(True, description="Skip notes modified between scan and rewrite")
    download_dir: str = Field("assets", description="Vault folder for downloaded images, empty for the note's folder")
    download_timeout_secs: float = Field(30.0, description="HTTP timeout when downloading network images")

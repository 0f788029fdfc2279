"""Uploader configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ._picgo._Data import _Data as _PicgoData
from ._test._Data import _Data as _TestData

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "picgo": _PicgoData,
    "test": _TestData,
}


class UploaderConfig(BaseModel):
    type: str = Field(..., description="Uploader backend type")
    data: BaseModel = Field(..., description="Backend-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"uploader config must be a dict, got {type(values).__name__}")
        uploader_type = values.get("type")
        if not uploader_type:
            raise ValueError("uploader.type is required")
        config_data_class = _BACKEND_REGISTRY.get(uploader_type)
        if not config_data_class:
            raise ValueError(f"Unknown backend type: {uploader_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data = values.get("data")
        if data is None:
            raise ValueError("uploader.data is required")
        # Allow empty dict - backend config classes have defaults
        if not isinstance(data, BaseModel):
            data = config_data_class(**data)
        return {**values, "data": data}

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result

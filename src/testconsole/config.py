from pydantic import BaseModel, Field, field_validator
from typing import Optional
import yaml, pathlib
from .output_level import OutputLevel
from .color import COLOR_SCHEMES

class ReporterOptions(BaseModel):
    output_level: OutputLevel = Field(OutputLevel.NORMAL, description="silent, progress_only, normal or verbose")
    use_color: Optional[bool] = Field(None, description="Force color on/off; None guesses from the terminal")
    color_scheme: str = Field("default", description="Key into COLOR_SCHEMES")

    model_config = {"frozen": True}

    @field_validator("output_level", mode="before")
    @classmethod
    def _parse_level(cls, v):
        return OutputLevel.parse(v)

    @field_validator("color_scheme")
    @classmethod
    def _known_scheme(cls, v: str) -> str:
        if v not in COLOR_SCHEMES:
            raise ValueError(f"unknown color scheme {v!r}; expected one of: {', '.join(sorted(COLOR_SCHEMES))}")
        return v

def load_options(path: str) -> ReporterOptions:
    data = yaml.safe_load(pathlib.Path(path).read_text()) or {}
    if isinstance(data, dict) and "reporter" in data:
        data = data["reporter"] or {}
    return ReporterOptions.model_validate(data)

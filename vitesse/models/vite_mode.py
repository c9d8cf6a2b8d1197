from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class ViteMode(BaseModel):
    """
    Either hot (assets served by the Vite dev server at hot_base_url) or
    production (assets served from the build directory).
    """

    model_config = ConfigDict(frozen=True)

    hot: bool
    hot_base_url: Optional[str] = None

    @model_validator(mode="after")
    def validate_hot_base_url(self) -> "ViteMode":
        if self.hot != (self.hot_base_url is not None):
            raise ValueError("hot_base_url must be set if and only if hot is true")
        return self

    @staticmethod
    def production() -> "ViteMode":
        return ViteMode(hot=False)

    @staticmethod
    def from_hot_content(hot_content: Optional[str]) -> "ViteMode":
        if hot_content is None:
            return ViteMode.production()
        return ViteMode(hot=True, hot_base_url=hot_content)

from typing import Literal

from pydantic_settings import BaseSettings


class InputConfig(BaseSettings):
    input_type: Literal["stdin", "local_file"]
    encoding: str = "utf-8"


class StdinInputConfig(InputConfig):
    input_type: Literal["stdin"] = "stdin"  # pyright: ignore[reportIncompatibleVariableOverride]


class LocalFileInputConfig(InputConfig):
    input_type: Literal["local_file"] = "local_file"  # pyright: ignore[reportIncompatibleVariableOverride]
    path: str


type InputConfigType = StdinInputConfig | LocalFileInputConfig

from pydantic_settings import BaseSettings


class OutputConfig(BaseSettings):
    output_path: str | None = None
    encoding: str = "utf-8"


type OutputConfigType = OutputConfig

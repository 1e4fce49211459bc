from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings


class AlgorithmConfig(BaseSettings):
    algorithm_name: Literal["prefix_doubling", "naive"]
    verify: bool = False
    separator: str = " "

    @field_validator("separator")
    @classmethod
    def check_separator(cls, value: str) -> str:
        if not value or not value.isspace():
            raise ValueError("separator must be non-empty whitespace")  # noqa: TRY003
        return value

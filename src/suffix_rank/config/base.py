from typing import override

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import PydanticBaseSettingsSource
from pydantic_settings import SettingsConfigDict
from pydantic_settings import TomlConfigSettingsSource

from .algorithms import AlgoConfig
from .algorithms import SuffixArrayAlgorithmConfig
from .debug import DebugConfig
from .io import InputConfigType
from .io import OutputConfig
from .io import OutputConfigType
from .io import StdinInputConfig


class Config(BaseSettings):
    input: InputConfigType = Field(default_factory=StdinInputConfig)
    algorithm: AlgoConfig = Field(default_factory=SuffixArrayAlgorithmConfig)
    output: OutputConfigType = Field(default_factory=OutputConfig)
    debug: DebugConfig = Field(default_factory=DebugConfig)

    model_config = SettingsConfigDict(toml_file="config.toml")  # pyright: ignore[reportUnannotatedClassAttribute]

    @classmethod
    @override
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:  # pragma: no cover
        return (init_settings, TomlConfigSettingsSource(settings_cls))

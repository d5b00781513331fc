from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from sgsclient.bootstrap.config.loader import get_configfile
from sgsclient.core.context import HOSTNAME_CAPACITY


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SGSCLIENT_",
        extra="ignore"
    )

    hostname: Annotated[
        str,
        Field(
            description=(
                "Hostname or IP address of the server to connect to.\n"
                "Its UTF-8 encoding plus one terminator byte must fit in\n"
                "`hostname_capacity`."
            ),
            min_length=1
        )
    ]

    port: Annotated[
        int,
        Field(
            description=(
                "TCP port of the server. Passed to the context verbatim;\n"
                "range checks are left to the connection engine."
            ),
            default=1139
        )
    ]

    hostname_capacity: Annotated[
        int,
        Field(
            description="Maximum hostname size in bytes, terminator included.",
            default=HOSTNAME_CAPACITY,
            gt=1
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        configfile = get_configfile()
        if configfile is None:
            return init_settings, env_settings

        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=configfile),
        )

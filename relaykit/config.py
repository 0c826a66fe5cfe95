"""
Config
======

Settings are plain annotated class attributes on a :class:`BaseConfig`
subclass. When the class is defined every setting is looked up in the
environment, then in a dotenv file, and converted to its annotated type.
Supported types are `str`, `int`, `bool` and `Optional` of those.

The application settings live on :class:`Config` and use the `RELAYKIT_`
prefix::

    RELAYKIT_PORT=9000
    RELAYKIT_DEBUG=true
    RELAYKIT_DEFAULT_PAGE_SIZE=25
"""

import os
import typing

from dotenv import dotenv_values

TRUTHY = ("1", "on", "y", "yes", "true")


def convert(hint: typing.Any, raw: str) -> typing.Any:
    """Convert a raw env value to the type of the setting.

    An empty value for an `Optional` setting means None.
    """
    if typing.get_origin(hint) is typing.Union:
        members = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(members) != 1:
            raise TypeError(f"Unsupported setting type {hint!r}")
        if not raw.strip():
            return None
        hint = members[0]

    if hint is bool:
        return raw.strip().lower() in TRUTHY
    if hint is int:
        return int(raw)
    if hint is str:
        return raw
    raise TypeError(f"Unsupported setting type {hint!r}")


class BaseConfig:
    """
    Environment backed settings::

        class Settings(BaseConfig, prefix="APP", env_file=".env.local"):
            port: int = 9000
            limit: typing.Optional[int] = None

    With `APP_PORT=8000` in the environment or in `.env.local` the class
    sees `Settings.port == 8000`. Values in the environment win over the
    dotenv file, settings found in neither keep their defaults.
    """

    _prefix: typing.ClassVar[str]
    _values: typing.ClassVar[typing.Dict[str, typing.Optional[str]]]

    def __init_subclass__(
        cls,
        prefix: typing.Optional[str] = None,
        env_file: str = ".env",
    ) -> None:
        cls._prefix = f"{prefix}_" if prefix else ""
        cls._values = {**dotenv_values(env_file), **os.environ}

        for name, hint in typing.get_type_hints(cls).items():
            if typing.get_origin(hint) is typing.ClassVar:
                continue
            raw = cls._values.get(f"{cls._prefix}{name}".upper())
            if raw is not None:
                setattr(cls, name, convert(hint, raw))


class Config(BaseConfig, prefix="RELAYKIT"):
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    graphql_path: str = "/graphql"
    # Unset means connections without `first` or `last` return every item.
    default_page_size: typing.Optional[int] = None
    max_page_size: typing.Optional[int] = 100

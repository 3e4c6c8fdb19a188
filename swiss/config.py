from dataclasses import dataclass, fields, replace
from typing import Any


@dataclass
class Settings:
    """defaults used when an operation's optional argument is omitted"""
    default_field: str = 'ID'  # pluck, rekey_from_arrays, rekey_from_objects
    join_delimiter: str = ', '
    join_and: str = ' and '
    json_indent: int = 4


settings = Settings()


def configure(**overrides: Any) -> Settings:
    """update the shared settings in place and return them"""
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"unknown setting(s): {', '.join(sorted(unknown))}")
    for name, value in overrides.items():
        setattr(settings, name, value)
    return settings


def reset() -> Settings:
    """restore every setting to its default"""
    defaults = Settings()
    for f in fields(Settings):
        setattr(settings, f.name, getattr(defaults, f.name))
    return settings


def snapshot() -> Settings:
    """an independent copy of the current settings"""
    return replace(settings)

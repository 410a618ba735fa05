from dataclasses import dataclass, field

from r2_operator.errors import ConfigField, ConfigurationError

DEFAULT_REGION = "auto"


@dataclass(frozen=True)
class ClientConfig:
    bucket_name: str
    access_key_id: str
    secret_access_key: str = field(repr=False)
    endpoint: str
    region: str = DEFAULT_REGION

    def __post_init__(self):
        missing = tuple(
            config_field
            for config_field in ConfigField
            if not _is_set(getattr(self, config_field.value))
        )
        if missing:
            raise ConfigurationError(missing)
        if not _is_set(self.region):
            object.__setattr__(self, "region", DEFAULT_REGION)


def _is_set(value: str | None) -> bool:
    return bool(value and value.strip())

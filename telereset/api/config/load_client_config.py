from .BackendConfig import BackendConfig
from .ClientConfig import ClientConfig


def load_client_config(base_url: str | None = None) -> ClientConfig:
    """Load the configuration, with ``base_url`` (the CLI's ``--url``) overriding ``backend.base_url``.

    Raises:
        ValueError: If the config file or the override is invalid
    """
    config = ClientConfig.load()
    if not base_url:
        return config
    backend = BackendConfig(**{**config.backend.model_dump(), "base_url": base_url})
    return config.model_copy(update={"backend": backend})

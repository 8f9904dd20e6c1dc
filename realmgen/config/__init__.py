from .settings import GeneratorSettings, load_settings

__all__ = [
    "GeneratorSettings",
    "load_settings",
]

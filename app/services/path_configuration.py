"""Static path configuration served to native shells."""

from app.schemas.path_configuration import PathConfiguration, PathConfigurationRule

MODAL = {"presentation": "modal"}

# Evaluated by the native shell, in order. Extend by appending rules of the same shape.
PATH_CONFIGURATION_RULES: tuple[tuple[tuple[str, ...], dict[str, str]], ...] = (
    (("/new$", "/edit$"), MODAL),
    (("/signup$", "/login$"), MODAL),
)

APP_SETTINGS: dict[str, object] = {}


def build_path_configuration() -> PathConfiguration:
    """Return a fresh copy of the path configuration document."""
    return PathConfiguration(
        settings=dict(APP_SETTINGS),
        rules=[
            PathConfigurationRule(patterns=list(patterns), properties=dict(properties))
            for patterns, properties in PATH_CONFIGURATION_RULES
        ],
    )

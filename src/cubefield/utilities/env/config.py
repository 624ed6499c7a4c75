from cubefield.utilities.env.rendering import RenderingConfiguration
from cubefield.utilities.env.window import WindowConfiguration


class Configuration(
    RenderingConfiguration,
    WindowConfiguration,
):
    """Aggregate environment configuration helpers."""

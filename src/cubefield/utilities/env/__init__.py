"""Environment configuration helpers."""

from cubefield.utilities.env.config import Configuration as Configuration
from cubefield.utilities.env.enums import \
    FrameExportStrategy as FrameExportStrategy

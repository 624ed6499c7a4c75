class EngineError(Exception):
    """Base class for failures raised by the background engine."""


class ContextUnavailable(EngineError):
    """The render target produced no usable drawing surface."""


class SurfaceNotMounted(EngineError):
    """The engine was started before its render target existed."""

from cubefield.engine.animation_loop import AnimationLoop as AnimationLoop
from cubefield.engine.animation_loop import render_frame as render_frame
from cubefield.engine.errors import ContextUnavailable as ContextUnavailable
from cubefield.engine.errors import EngineError as EngineError
from cubefield.engine.errors import SurfaceNotMounted as SurfaceNotMounted
from cubefield.engine.surface_manager import SurfaceManager as SurfaceManager

from cubefield.host.scheduler import FrameScheduler as FrameScheduler
from cubefield.host.target import OffscreenTarget as OffscreenTarget
from cubefield.host.target import RenderTarget as RenderTarget
from cubefield.host.target import WindowTarget as WindowTarget
from cubefield.host.pygame_host import PygameHost as PygameHost

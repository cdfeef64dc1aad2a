from .errors import AllocationError, BitmapIOError
from .render import BullseyeBuilder, RenderSettings

__all__ = ["AllocationError", "BitmapIOError", "BullseyeBuilder", "RenderSettings"]

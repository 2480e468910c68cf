"""Animation system - non-blocking, frame-driven animations."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, List, Callable, Dict
from enum import Enum, auto

from .types import Artwork
from .math_utils import ease_in_out_cubic
from .logging import now, channel

_log = channel("ANIM")


class AnimationType(Enum):
    """Types of animations; one of each type runs at a time."""
    CROSSFADE = auto()   # Artwork change


@dataclass
class Animation(ABC):
    """Base class for all animations."""
    start_time: float = field(default_factory=now)
    duration_ms: float = 0.0
    finished: bool = False

    def progress_at(self, t: float) -> float:
        """Animation progress (0.0 to 1.0) at time t."""
        if self.duration_ms <= 0:
            return 1.0
        elapsed = (t - self.start_time) * 1000.0
        return max(0.0, min(1.0, elapsed / self.duration_ms))

    def is_complete_at(self, t: float) -> bool:
        return self.finished or self.progress_at(t) >= 1.0

    @abstractmethod
    def get_type(self) -> AnimationType:
        """Get the type of this animation."""
        pass

    def finish(self) -> None:
        """Mark animation as finished."""
        self.finished = True


@dataclass
class CrossFadeAnimation(Animation):
    """Fade from the previously shown artwork to the current one."""
    outgoing: Optional[Artwork] = None

    def get_type(self) -> AnimationType:
        return AnimationType.CROSSFADE

    def eased_at(self, t: float) -> float:
        """Incoming alpha at time t; outgoing alpha is 1 minus this."""
        return ease_in_out_cubic(self.progress_at(t))


class AnimationController:
    """Manages all active animations."""

    def __init__(self):
        self._animations: List[Animation] = []
        self._on_complete_callbacks: Dict[AnimationType, Callable] = {}

    @property
    def has_animations(self) -> bool:
        """Check if any animations are running."""
        return len(self._animations) > 0

    def get_animation(self, anim_type: AnimationType) -> Optional[Animation]:
        """Get currently running animation of specified type."""
        for anim in self._animations:
            if anim.get_type() == anim_type:
                return anim
        return None

    def is_running(self, anim_type: AnimationType) -> bool:
        """Check if an animation of the specified type is running."""
        return self.get_animation(anim_type) is not None

    def start(self, animation: Animation, on_complete: Optional[Callable] = None) -> None:
        """Start a new animation, replacing any existing of same type."""
        anim_type = animation.get_type()
        self._animations = [a for a in self._animations if a.get_type() != anim_type]
        self._animations.append(animation)
        self._on_complete_callbacks.pop(anim_type, None)
        if on_complete:
            self._on_complete_callbacks[anim_type] = on_complete

        _log(f"Started {anim_type.name} duration={animation.duration_ms}ms")

    def cancel(self, anim_type: AnimationType) -> None:
        """Cancel animation of specified type."""
        self._animations = [a for a in self._animations if a.get_type() != anim_type]
        self._on_complete_callbacks.pop(anim_type, None)
        _log(f"Cancelled {anim_type.name}")

    def cancel_all(self) -> None:
        """Cancel all running animations."""
        self._animations.clear()
        self._on_complete_callbacks.clear()

    def update(self, t: Optional[float] = None) -> List[Animation]:
        """Drop finished animations and return them."""
        t = now() if t is None else t
        completed = []
        still_running = []

        for anim in self._animations:
            if anim.is_complete_at(t):
                completed.append(anim)
                anim_type = anim.get_type()
                callback = self._on_complete_callbacks.pop(anim_type, None)
                if callback:
                    try:
                        callback(anim)
                    except Exception as e:
                        _log.err(f"Callback failed for {anim_type.name}: {e!r}")
                _log(f"Completed {anim_type.name}")
            else:
                still_running.append(anim)

        self._animations = still_running
        return completed


def create_crossfade_animation(
    duration_ms: float,
    outgoing: Artwork,
    start_time: Optional[float] = None
) -> CrossFadeAnimation:
    """Create an artwork cross-fade."""
    return CrossFadeAnimation(
        start_time=now() if start_time is None else start_time,
        duration_ms=duration_ms,
        outgoing=outgoing,
    )

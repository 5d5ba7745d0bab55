"""A complete resolution pass over a list of objects.

``Timeline.resolve`` is the compile step: it walks objects and their actions
in declaration order with a fresh ``ResolutionContext``, assigns every frame
range and reports all problems at once. After that, ``values_at`` and
``settings_at`` answer per-frame questions for the rendering backend.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from motionframe.config.defaults import ResolutionSettings, get_default_settings
from motionframe.core.context import ResolutionContext
from motionframe.core.elements import Action, FrameRange, Object, ObjectSetting
from motionframe.core.errors import FrameResolutionWarning
from motionframe.core.frames import compute_frames, default_frames
from motionframe.core.interpolation import check_animation_domain, evaluate_action
from motionframe.core.transitions import Rotation, Scaling, Translation
from motionframe.utils import logging as log


class Timeline:
    """Objects of one video and the frames they occupy.

    Examples:
        >>> background = Object((1, 60))
        >>> _ = background.add_action(Action((1, 30), transition=Rotation()))
        >>> timeline = Timeline([background])
        >>> timeline.resolve()
        []
        >>> timeline.frame_range
        FrameRange(start=1, end=60)
    """

    def __init__(
        self,
        objects: Optional[List[Object]] = None,
        settings: Optional[ResolutionSettings] = None,
        policy=default_frames,
    ):
        self.objects: List[Object] = list(objects or [])
        self.settings = settings or get_default_settings()
        self.policy = policy
        self.context = ResolutionContext()
        self.warnings: List[FrameResolutionWarning] = []
        self._resolved = False

    def add(self, obj: Object) -> Object:
        self.objects.append(obj)
        self._resolved = False
        return obj

    def resolve(self) -> List[FrameResolutionWarning]:
        """Assign frames to every object and action.

        Returns:
            All warnings of the pass, frame containment first, then curves
            that do not span [0, 1]

        Raises:
            MissingFrameRangeError: If the first object has no explicit frames
        """
        log.set_level(self.settings.log_level)
        self.context = ResolutionContext()
        self._resolved = False

        warnings: List[FrameResolutionWarning] = list(compute_frames(
            self.objects,
            context=self.context,
            policy=self.policy,
            recursive=True,
            log_warnings=self.settings.warn_out_of_range,
        ))

        for obj in self.objects:
            for action in obj.actions:
                warning = check_animation_domain(action.anim, self.settings.animation_domain_atol)
                if warning is not None:
                    log.warning(f"{action!r} of {obj!r}: {warning}")
                    warnings.append(warning)

        self.warnings = warnings
        self._resolved = True
        log.debug(
            f"Resolved {len(self.objects)} objects spanning {self.frame_range} "
            f"with {len(warnings)} warnings",
            log.BLUE,
        )
        return warnings

    @property
    def frame_range(self) -> Optional[FrameRange]:
        """Frames covered by all objects, None before resolution."""
        ranges = [o.frame_range for o in self.objects if o.frame_range is not None]
        if not ranges:
            return None
        return FrameRange(min(r.start for r in ranges), max(r.end for r in ranges))

    def _require_resolved(self) -> None:
        if not self._resolved:
            raise RuntimeError("Timeline has not been resolved; call resolve() first")

    def values_at(self, frame: int) -> Iterator[Tuple[Object, Action, object]]:
        """Yield ``(object, action, value)`` for every action active at ``frame``."""
        self._require_resolved()
        for obj in self.objects:
            if not obj.is_active(frame):
                continue
            for action in obj.actions:
                if action.is_active(frame):
                    yield obj, action, evaluate_action(action, frame, check_domain=False)

    def settings_at(self, frame: int) -> Dict[Object, ObjectSetting]:
        """Rendering setting of each object visible at ``frame``.

        Translations add their offset to the object's start position, scalings
        set the absolute scale and rotations set the angle. Actions that are
        already over keep contributing their final value when ``keep`` is set.
        """
        self._require_resolved()
        result = {}
        for obj in self.objects:
            if not obj.is_active(frame):
                continue
            setting = obj.current_setting.copy()
            setting.position = obj.start_pos.copy()
            for action in obj.actions:
                if action.is_active(frame):
                    at_frame = frame
                elif action.keep and action.frame_range.end < frame:
                    at_frame = action.frame_range.end
                else:
                    continue
                value = evaluate_action(action, at_frame, check_domain=False)
                if isinstance(action.transition, Translation):
                    setting.position = setting.position + value
                elif isinstance(action.transition, Scaling):
                    setting.scale = value
                elif isinstance(action.transition, Rotation):
                    setting.angle = float(value)
            result[obj] = setting
        return result

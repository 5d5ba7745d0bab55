"""Tracking of the object/action currently being resolved.

A ``ResolutionContext`` belongs to a single top-to-bottom resolution pass.
It remembers which object and action are current and which ones came right
before them, so that "relative to the previous one" declarations and
drawing code can find them. Build a new context (or ``reset()`` one) for
every independent pass.
"""

from enum import Enum
from typing import Optional

from motionframe.core.elements import Action, Object, ObjectSetting


class ElementKind(Enum):
    OBJECT = "Object"
    ACTION = "Action"

    @staticmethod
    def of(element) -> "ElementKind":
        if isinstance(element, Action):
            return ElementKind.ACTION
        if isinstance(element, Object):
            return ElementKind.OBJECT
        raise TypeError(f"Expected an Object or Action, got {type(element).__name__}")


class ResolutionContext:
    """Current and previous object/action of one resolution pass.

    Examples:
        >>> ctx = ResolutionContext()
        >>> a, x = Object((1, 10)), Action((1, 5))
        >>> ctx.visit(a); ctx.visit(x)
        >>> ctx.current_object is a and ctx.current_action is x
        True
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.current_object: Optional[Object] = None
        self.current_action: Optional[Action] = None
        self.previous_object: Optional[Object] = None
        self.previous_action: Optional[Action] = None
        self.current_kind: Optional[ElementKind] = None

    def _archive_current(self) -> None:
        # Whatever was visited last becomes "previous" for its own kind only
        if self.current_kind is ElementKind.OBJECT:
            if self.current_object is not None:
                self.previous_object = self.current_object
        elif self.current_kind is ElementKind.ACTION:
            if self.current_action is not None:
                self.previous_action = self.current_action

    def visit(self, element) -> None:
        """Make ``element`` current, archiving the last visited element."""
        kind = ElementKind.of(element)
        self._archive_current()
        if kind is ElementKind.OBJECT:
            self.current_object = element
            self.current_action = None
        else:
            self.current_action = element
        self.current_kind = kind

    def get_current_setting(self) -> ObjectSetting:
        if self.current_object is None:
            raise RuntimeError("No object is currently being defined")
        return self.current_object.current_setting

    def __repr__(self) -> str:
        return (
            f"ResolutionContext(current_object={self.current_object!r}, "
            f"current_action={self.current_action!r}, "
            f"previous_object={self.previous_object!r}, "
            f"previous_action={self.previous_action!r}, "
            f"current_kind={self.current_kind})"
        )

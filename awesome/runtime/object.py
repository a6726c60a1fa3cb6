"""
The central object of the Awesome runtime.

Everything reachable from Awesome code is an ``AwesomeObject``: user values,
primitive wrappers and classes alike. Each object points at its class, where
its methods live, and may box a host value (a number, a string, a boolean or
``None`` for nil).
"""

from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from .awesome_class import AwesomeClass

# Marks "no boxed value given"; None is a real boxed value (nil)
_UNBOXED = object()


class AwesomeObject:
    """An instance of an Awesome class."""

    def __init__(self, runtime_class: Optional['AwesomeClass'], boxed_value: Any = _UNBOXED):
        self.runtime_class = runtime_class
        self.boxed_value = self if boxed_value is _UNBOXED else boxed_value

    @property
    def is_boxed(self) -> bool:
        """True when this object carries a host value."""
        return self.boxed_value is not self

    def call(self, method: str, arguments: Optional[List['AwesomeObject']] = None) -> Any:
        """Look ``method`` up in this object's class and invoke it on self."""
        if arguments is None:
            arguments = []
        return self.runtime_class.lookup(method).call(self, arguments)

    def __repr__(self):
        class_name = getattr(self.runtime_class, 'name', None) or '?'
        if self.is_boxed:
            return f"<{class_name} {self.boxed_value!r}>"
        return f"<{class_name} at {id(self):#x}>"

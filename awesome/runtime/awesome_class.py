"""
Classes of the Awesome runtime.

Classes are objects too, so ``AwesomeClass`` extends ``AwesomeObject``. A
class holds the method table used for dispatch and creates instances via
``new`` / ``new_with_value``. The class of every class is the ``Class``
constant, including ``Class`` itself.
"""

import logging
from typing import Any, Callable, Dict, Optional, Union

from .object import AwesomeObject
from .method import NativeMethod, AwesomeMethod
from .constants import Constants
from ..errors import MethodNotFoundError

logger = logging.getLogger(__name__)

Method = Union[NativeMethod, AwesomeMethod]


class AwesomeClass(AwesomeObject):
    """A runtime class: a named method table that can be instantiated."""

    def __init__(self, name: Optional[str] = None, runtime_class: Optional['AwesomeClass'] = None):
        # Before bootstrap has created Class this is None; bootstrap patches it
        if runtime_class is None:
            runtime_class = Constants.get("Class")
        super().__init__(runtime_class)
        self.name = name
        self.methods: Dict[str, Method] = {}

    def lookup(self, method_name: str) -> Method:
        """Find a method in this class's own table."""
        method = self.methods.get(method_name)
        if method is None:
            raise MethodNotFoundError(method_name, self)
        return method

    def has_method(self, method_name: str) -> bool:
        return method_name in self.methods

    def define(self, name: str, method: Union[Method, Callable[[Any, list], Any]]) -> Method:
        """
        Add a method to this class, replacing any method of the same name.

        ``method`` is a NativeMethod, an AwesomeMethod, or a plain host
        function taking ``(receiver, arguments)``.
        """
        name = str(name)
        if not isinstance(method, (NativeMethod, AwesomeMethod)):
            method = NativeMethod(method, name)
        if name in self.methods:
            logger.debug("Redefining %s#%s", self.name, name)
        self.methods[name] = method
        return method

    # "def" is reserved in Python
    def_ = define

    def new(self) -> AwesomeObject:
        """Create a new instance of this class."""
        return AwesomeObject(self)

    def new_with_value(self, value: Any) -> AwesomeObject:
        """Create an instance boxing a host value, like a String or Number."""
        return AwesomeObject(self, value)

    def __repr__(self):
        return f"<class {self.name or '?'}>"

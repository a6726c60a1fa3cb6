"""
Callables stored in a class's method table.

There are two kinds: ``NativeMethod`` wraps a host function, and
``AwesomeMethod`` is a method defined in Awesome code whose body is run by
the evaluator. Both are invoked as ``method.call(receiver, arguments)``.
"""

from typing import Any, Callable, List, Optional

from .context import Context
from ..errors import ArgumentCountError


class NativeMethod:
    """A method implemented by a host function ``function(receiver, arguments)``."""

    def __init__(self, function: Callable[[Any, List[Any]], Any], name: Optional[str] = None):
        self.function = function
        self.name = name or getattr(function, '__name__', '<native>')

    def call(self, receiver, arguments: List[Any]) -> Any:
        return self.function(receiver, arguments)

    def __repr__(self):
        return f"<native method {self.name}>"


class AwesomeMethod:
    """
    A method defined in Awesome code.

    ``body`` is whatever the evaluator built for the method body; it only
    has to provide ``eval(context)``.
    """

    def __init__(self, name: str, params: List[str], body):
        self.name = name
        self.params = list(params)
        self.body = body

    def call(self, receiver, arguments: List[Any]) -> Any:
        """Run the body with self bound to ``receiver`` and params as locals."""
        if len(arguments) != len(self.params):
            raise ArgumentCountError(self.name, len(self.params), len(arguments))

        # New scope for the method body
        context = Context(receiver)
        for param, argument in zip(self.params, arguments):
            context.locals[param] = argument

        return self.body.eval(context)

    def __repr__(self):
        return f"<method {self.name}({', '.join(self.params)})>"

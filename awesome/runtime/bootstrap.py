"""
Bootstrap of the Awesome runtime.

Builds the seed class graph and the ``true`` / ``false`` / ``nil``
singletons in ``Constants``, defines the two native methods every program
relies on (``Class#new`` and ``Object#print``) and creates ``RootContext``,
the context the evaluator starts a program in.

Runs once when the module is imported; calling ``bootstrap()`` again is a
no-op.
"""

import logging
from typing import Dict

from .awesome_class import AwesomeClass
from .constants import Constants
from .context import Context
from ..errors import ArgumentCountError

logger = logging.getLogger(__name__)

SEED_CLASSES = ("Object", "Number", "String", "TrueClass", "FalseClass", "NilClass")

RootContext = None


def bootstrap() -> Dict[str, object]:
    """Populate ``Constants`` with the seed objects. Returns the table."""
    global RootContext
    if "Class" in Constants:
        return Constants

    # Class is its own class: allocate first, then patch the reference
    class_class = AwesomeClass("Class")
    class_class.runtime_class = class_class
    Constants["Class"] = class_class

    for name in SEED_CLASSES:
        Constants[name] = AwesomeClass(name)

    Constants["true"] = Constants["TrueClass"].new_with_value(True)
    Constants["false"] = Constants["FalseClass"].new_with_value(False)
    Constants["nil"] = Constants["NilClass"].new_with_value(None)

    Constants["Class"].define("new", class_new)
    Constants["Object"].define("print", object_print)

    RootContext = Context(Constants["Object"].new())

    logger.debug("Runtime bootstrapped with constants: %s", ", ".join(Constants))
    return Constants


def root_context() -> Context:
    """Return the context evaluation starts in."""
    bootstrap()
    return RootContext


def class_new(receiver, arguments):
    """Class#new: create an instance of the receiving class."""
    return receiver.new()


def object_print(receiver, arguments):
    """Object#print: write the first argument on its own line. Returns nil."""
    if not arguments:
        raise ArgumentCountError("print", 1, 0)
    print(to_text(arguments[0].boxed_value))
    return Constants["nil"]


def to_text(value) -> str:
    """Textual form of a boxed value as Awesome prints it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


bootstrap()

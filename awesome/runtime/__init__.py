"""
The Awesome object runtime.

Importing this package bootstraps the seed classes, so ``Constants`` and
``RootContext`` are ready for the evaluator.
"""

from .object import AwesomeObject
from .awesome_class import AwesomeClass
from .method import NativeMethod, AwesomeMethod
from .context import Context
from .constants import Constants
from .bootstrap import bootstrap, root_context

__all__ = [
    "AwesomeObject",
    "AwesomeClass",
    "NativeMethod",
    "AwesomeMethod",
    "Context",
    "Constants",
    "bootstrap",
    "root_context",
]

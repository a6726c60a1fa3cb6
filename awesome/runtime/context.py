"""
Context of evaluation.

A ``Context`` is the environment a block of code runs in:

* the local variables,
* ``current_self``, the receiver of calls written without one
  (``print("hi")`` is ``self.print("hi")``),
* ``current_class``, the class that ``def`` adds methods to.

Scoping rules belong to the evaluator; a new context starts with no locals
and does not see its creator's.
"""

from typing import Dict


class Context:
    """Locals, self and current class of one lexical scope."""

    def __init__(self, current_self, current_class=None):
        self.locals: Dict[str, object] = {}
        self.current_self = current_self
        if current_class is None:
            current_class = current_self.runtime_class
        self.current_class = current_class

    def __repr__(self):
        return (f"Context(self={self.current_self!r}, "
                f"class={self.current_class!r}, locals={sorted(self.locals)})")

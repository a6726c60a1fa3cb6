"""
Process-wide table of named runtime objects.

Holds every class by name plus the ``true``, ``false`` and ``nil``
singletons. It is filled by ``bootstrap()``; class definitions evaluated
later may add entries. There is no locking: embedders running several
programs at once must serialize access themselves.
"""

from typing import Dict

Constants: Dict[str, object] = {}

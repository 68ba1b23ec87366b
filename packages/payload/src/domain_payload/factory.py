"""Payload factory that hands out fresh, empty Payload instances.

Services that receive a factory instead of constructing Payload directly
can have the concrete class swapped (a subclass, or a test double) in one
place.
"""

from __future__ import annotations

import logging

from domain_payload.payload import Payload

logger = logging.getLogger(__name__)


class PayloadFactory:
    """Stateless source of new Payload instances."""

    def __init__(self, payload_class: type[Payload] = Payload) -> None:
        if not (isinstance(payload_class, type) and issubclass(payload_class, Payload)):
            raise TypeError(
                f"payload_class must be Payload or a subclass of it, got {payload_class!r}"
            )
        self.payload_class = payload_class
        logger.debug(f"PayloadFactory: building {payload_class.__name__} instances")

    def new_instance(self) -> Payload:
        """Return a new payload with every field at its absent value."""
        return self.payload_class()

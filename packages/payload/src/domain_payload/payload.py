"""The Payload value object: what a domain operation hands back.

A service-layer method creates (or is given) a Payload, fills it in with
chained setters, and returns it. The presentation layer reads the status
and decides how to interpret output, messages and extras.

Design choices:
  - The five fields are typed Any and default to None, the absent value.
    Pydantic performs no coercion on Any, so stored objects (including
    exceptions kept as output) come back by identity.
  - Assignment is not validated. set_status stores any value, known token
    or not; unknown tokens are only logged at DEBUG.
  - Setters return self so one expression can populate the whole payload.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel

from domain_payload.status import PayloadStatus, is_known_status

logger = logging.getLogger(__name__)


@runtime_checkable
class PayloadInterface(Protocol):
    """The accessor/mutator contract consumers can type against."""

    def set_status(self, status: Any) -> PayloadInterface: ...
    def get_status(self) -> Any: ...
    def set_input(self, input: Any) -> PayloadInterface: ...
    def get_input(self) -> Any: ...
    def set_output(self, output: Any) -> PayloadInterface: ...
    def get_output(self) -> Any: ...
    def set_messages(self, messages: Any) -> PayloadInterface: ...
    def get_messages(self) -> Any: ...
    def set_extras(self, extras: Any) -> PayloadInterface: ...
    def get_extras(self) -> Any: ...


class Payload(BaseModel):
    """Status, input, output, messages and extras of one domain operation."""

    Status: ClassVar[type[PayloadStatus]] = PayloadStatus

    status: Any = None
    input: Any = None
    output: Any = None
    messages: Any = None  # usually field -> list of strings
    extras: Any = None

    def set_status(self, status: Any) -> Payload:
        if status is not None and not is_known_status(status):
            logger.debug("Payload: storing non-standard status %r", status)
        self.status = status
        return self

    def get_status(self) -> Any:
        return self.status

    def set_input(self, input: Any) -> Payload:
        self.input = input
        return self

    def get_input(self) -> Any:
        return self.input

    def set_output(self, output: Any) -> Payload:
        self.output = output
        return self

    def get_output(self) -> Any:
        return self.output

    def set_messages(self, messages: Any) -> Payload:
        self.messages = messages
        return self

    def get_messages(self) -> Any:
        return self.messages

    def set_extras(self, extras: Any) -> Payload:
        self.extras = extras
        return self

    def get_extras(self) -> Any:
        return self.extras

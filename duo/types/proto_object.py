from __future__ import annotations

from io import StringIO

from duo import DuoValue
from duo.printer import show
from duo.types.environment import Environment


class ProtoObject:
    """A user-level object: a frame of slots plus the prototype it was cloned from.

    A clone's frame is a child of its prototype's frame, so reads fall through
    to the prototype while writes stay on the clone.
    """

    __slots__ = ("env", "proto")

    def __init__(self, env: Environment, proto: ProtoObject | None = None):
        self.env: Environment = env
        self.proto: ProtoObject | None = proto

    def clone(self) -> ProtoObject:
        return ProtoObject(self.env.child(), self)

    def get(self, name: str) -> DuoValue | None:
        return self.env.get(name)

    def assign(self, name: str, value: DuoValue) -> DuoValue:
        """Set an own slot; object slots are always writable."""
        return self.env.define_force(name, value)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(",".join(f"{k}:{show(v)}" for k, v in self.env.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<ProtoObject {self}>"


def clone_value(value: DuoValue) -> DuoValue:
    """Objects clone into a fresh child; every other value is its own clone."""
    if isinstance(value, ProtoObject):
        return value.clone()
    return value

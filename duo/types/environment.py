"""Runtime environment for Duo.

The Environment stores bindings of slot names to Duo values and supports nested
scopes via an `outer` link. Closures, macro calls and prototype objects each
hold a frame; frames are shared by reference, so an update made through one
holder is visible to every other holder of the same frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from duo import DuoValue
from duo.errors import DuoRedefinedSlot, DuoUndefinedSlot
from duo.printer import show


class Environment:
    """Hierarchical mapping from slot names to Duo values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, DuoValue] = {}
        self.outer: Environment | None = outer

    def child(self) -> Environment:
        """Return a fresh frame whose parent is this one."""
        return Environment(outer=self)

    def define(self, name: str, value: DuoValue) -> DuoValue:
        """Bind `name` in this frame.

        Raises DuoRedefinedSlot if this frame already binds `name`; bindings in
        outer frames are shadowed, not touched.
        """
        if name in self.vars:
            raise DuoRedefinedSlot(f"{name} is already defined in this scope")
        self.vars[name] = value
        return value

    def define_force(self, name: str, value: DuoValue) -> DuoValue:
        """Bind `name` in this frame, replacing any existing binding."""
        self.vars[name] = value
        return value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def update(self, name: str, value: DuoValue) -> DuoValue:
        """Rebind the nearest existing binding of `name` in the chain.

        Raises DuoUndefinedSlot if the name is not bound anywhere.
        """
        env = self.find(name)
        if env is None:
            raise DuoUndefinedSlot(f"Cannot update undefined slot {name}")
        env.vars[name] = value
        return value

    def get(self, name: str) -> DuoValue | None:
        """Look up `name` through the chain; None when unbound."""
        env = self.find(name)
        return None if env is None else env.vars[name]

    def items(self) -> Iterator[tuple[str, DuoValue]]:
        """This frame's own bindings, in definition order."""
        return iter(self.vars.items())

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {show(v)}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"

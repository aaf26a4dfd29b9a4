from __future__ import annotations


class NilType:
    """The only falsy value; `Nil` is its single instance."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False


Nil = NilType()

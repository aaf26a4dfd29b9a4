from duo.builtin.natives import NATIVES, register

__all__ = ["NATIVES", "register"]

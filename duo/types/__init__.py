from duo.types.nil import Nil, NilType
from duo.types.message import Message
from duo.types.environment import Environment
from duo.types.fun import Fun, Macro
from duo.types.proto_object import ProtoObject, clone_value
from duo.types.native import NativeFunction
from duo.types.tail_call import TailCall

__all__ = [
    "Nil",
    "NilType",
    "Message",
    "Environment",
    "Fun",
    "Macro",
    "ProtoObject",
    "clone_value",
    "NativeFunction",
    "TailCall",
]

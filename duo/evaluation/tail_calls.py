"""Static tail-position marking, run once when a closure is built.

Tail positions are the body itself, the right side of `;`, `&&` and `||`,
and both branches of `if`. A call there whose name is a plain identifier
(not a default method) gets `is_tail_call = True`; the evaluator turns such a
call into a TailCall only if it resolves to a closure.
"""

from __future__ import annotations

import re

from duo import Node
from duo.evaluation.default_methods import DEFAULT_METHODS
from duo.types.message import Message

_IDENTIFIER = re.compile(r"[a-zA-Z_]")
_PASS_THROUGH = frozenset({";", "&&", "||"})


def mark_tail_calls(node: Node) -> None:
    if not isinstance(node, Message) or node.args is None:
        return
    if node.name in _PASS_THROUGH:
        if node.receiver is not None and len(node.args) == 1:
            mark_tail_calls(node.args[0])
    elif node.name == "if":
        for branch in node.args:
            mark_tail_calls(branch)
    elif _IDENTIFIER.match(node.name) and node.name not in DEFAULT_METHODS:
        node.is_tail_call = True

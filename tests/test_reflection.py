import pytest

from duo import errors
from duo.builtin import NATIVES
from duo.printer import show
from duo.types import Message, NativeFunction


@pytest.mark.parametrize(
    "code,expected",
    [
        ('message("__","method")', "method"),
        ('message("_@","method")', "method()"),
        ('message("_@","method", 1,2,3)', "method(1, 2, 3)"),
        ('message("@_",target,"method")', "target.method"),
        ('message("@@", target,"method")', "target.method()"),
        ('message("@@", target,"method", 1,2,3)', "target.method(1, 2, 3)"),
        ('message("@@", 1 + 2, "print")', "1.+(2).print()"),
    ],
)
def test_message_shapes(interp, code, expected):
    result = interp.eval(code)
    assert isinstance(result, Message)
    assert show(result) == expected


def test_message_parts_stay_unevaluated(interp, printed):
    node = interp.eval('message("_@", "f", 1.print())')
    assert node.args == (Message(1, "print", ()),)
    assert printed.lines == []


def test_message_reference_shape_is_slot_reference(interp):
    assert interp.eval('message("__", "x")').is_slot_reference
    assert not interp.eval('message("_@", "x")').is_slot_reference


@pytest.mark.parametrize(
    "code",
    [
        'message("__", 1)',
        'message("__", "a", 1)',
        'message("xx", "a")',
        'message("@_", target)',
        'message("@_", target, "m", 1)',
        'message("@@", target, 3)',
        'message(1, "a")',
    ],
)
def test_malformed_message(interp, code):
    with pytest.raises(errors.DuoTypeError):
        interp.eval(code)


@pytest.mark.parametrize("code", ['message()', 'message("__")'])
def test_message_arity(interp, code):
    with pytest.raises(errors.DuoArityError):
        interp.eval(code)


def test_eval_node_runs_built_message(interp):
    assert interp.eval('evalNode(message("@@",5,"+",7))') == 12


def test_eval_node_of_stored_message(interp):
    interp.eval('add := fun(a, b, a + b); m := message("_@", "add", 1, 2)')
    assert interp.eval("evalNode(m)") == 3


def test_eval_node_sees_current_scope(interp):
    interp.eval('m := message("__", "y")')
    interp.eval("y := 9")
    assert interp.eval("evalNode(m)") == 9


def test_eval_node_of_plain_value(interp):
    assert interp.eval("evalNode(4)") == 4


@pytest.mark.parametrize("code", ["evalNode()", "evalNode(1, 2)"])
def test_eval_node_arity(interp, code):
    with pytest.raises(errors.DuoArityError):
        interp.eval(code)


def test_eval_str(interp):
    assert interp.eval('evalStr("5+7")') == 12


def test_eval_str_evaluates_its_argument(interp):
    interp.eval('code := "1 +"')
    assert interp.eval('evalStr(code + " 2")') == 3


def test_eval_str_defines_in_calling_scope(interp):
    interp.eval('evalStr("q := 3")')
    assert interp.eval("q") == 3


def test_eval_str_inside_fun_uses_call_scope(interp):
    interp.eval('f := fun(a, evalStr("a * 2"))')
    assert interp.eval("f(21)") == 42


@pytest.mark.parametrize(
    "code,error",
    [
        ("evalStr(5)", errors.DuoTypeError),
        ("evalStr()", errors.DuoArityError),
        ('evalStr("1 +")', errors.DuoSyntaxError),
        ('evalStr("@")', errors.DuoLexicalError),
    ],
)
def test_eval_str_errors(interp, code, error):
    with pytest.raises(error):
        interp.eval(code)


def test_natives_are_bound_by_name(interp):
    for native in NATIVES:
        value = interp.eval(native.name)
        assert isinstance(value, NativeFunction)
        assert show(value) == native.name


def test_natives_can_be_aliased(interp):
    interp.eval("lambda := fun")
    assert interp.eval("sq := lambda(x, x * x); sq(7)") == 49

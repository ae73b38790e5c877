## catfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import catfl.api as J
from catfl.types import Stack, nil, stack_depth, Operation, Push, Pop, Dup, Swap, Add, Mul, Apply, Done, Suspended
from catfl.formatting import format_item, format_stack, show_stack

import pytest


def test_stack_type_and_accessors():
    assert hasattr(J, 'Stack')
    assert hasattr(J, 'nil')

    # List [1,2,3] becomes stack with 1 on top.
    stack = J.to_stack([1, 2, 3])
    assert isinstance(stack, Stack)
    assert stack.head == 1
    assert stack.tail.head == 2
    assert stack.tail.tail.head == 3
    assert stack.tail.tail.tail is nil

    assert nil.head is None
    assert nil.tail is None


def test_stack_construction():
    s1 = Stack(nil, 5)
    assert s1.head == 5
    assert s1.tail is nil

    s2 = Stack(s1, 10)
    assert s2.head == 10
    assert s2.tail.head == 5

    s3 = nil.pushed(3, 2, 1)
    assert J.from_stack(s3) == [1, 2, 3]


def test_stack_nil_is_singleton():
    with pytest.raises(ValueError):
        Stack(None, None)
    assert J.to_stack([]) is nil


def test_stack_truth_value_is_ambiguous():
    with pytest.raises(TypeError):
        bool(J.to_stack([1]))


def test_stack_depth():
    assert stack_depth(nil) == 0
    assert stack_depth(J.to_stack([7])) == 1
    assert stack_depth(J.to_stack(list(range(50)))) == 50


def test_stack_is_structurally_shared():
    base = J.to_stack([2, 1])
    pushed = Stack(base, 3)
    assert pushed.tail is base
    assert J.from_stack(base) == [2, 1]


def test_stack_repr_and_formatting():
    stack = J.to_stack([1, 2, 3])
    assert repr(stack) == "< 3 2 1 >"
    assert repr(nil) == "< nil >"
    assert format_stack(stack) == "3 2 1"
    assert format_stack(nil) == "∅"
    assert format_item(stack) == "<3 2 1>"
    assert format_item([1, "a", True]) == '[1 "a" true]'


def test_nested_values_format_on_one_line():
    inner = J.to_stack([2, 1])
    assert format_item([inner, nil, b"x"]) == "[<1 2> <> b'x']"
    assert format_stack(J.to_stack(["a\"b", [1, [2]]])) == '[1 [2]] "a\\"b"'


def test_show_stack_keeps_the_head_visible(capsys):
    show_stack(J.to_stack(list(range(100))), width=20)
    out = capsys.readouterr().out
    assert out.startswith("… ") and out.rstrip("\n").endswith(" 2 1 0")
    assert len(out.rstrip("\n")) == 20


def test_operations_are_values():
    assert Push(1) == Push(1)
    assert Push(1) != Push(2)
    assert Pop() == Pop()
    assert Add() != Mul()
    assert hash(Dup()) == hash(Dup())
    assert all(isinstance(op, Operation) for op in (Push(0), Pop(), Dup(), Swap(), Add(), Mul(), Apply(id)))


def test_operation_names_and_arity():
    cases = [(Push(0), 'push', 0), (Pop(), 'pop', 1), (Dup(), 'dup', 1), (Swap(), 'swap', 2),
             (Add(), 'add', 2), (Mul(), 'mul', 2), (Apply(id), 'apply', 0)]
    for op, name, arity in cases:
        assert op.name == name
        assert op.arity == arity


def test_operation_repr():
    assert repr(Pop()) == "pop"
    assert repr(Push(4)) == "4 push"

    def reverse(stk): return stk
    assert repr(Apply(reverse)) == "[reverse] apply"


def test_operations_are_immutable():
    op = Push(1)
    with pytest.raises(AttributeError):
        op.value = 2


def test_programs_are_immutable_values():
    assert Done(3) == Done(3)
    program = Suspended(Pop(), Done)
    with pytest.raises(AttributeError):
        program.operation = Dup()

import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from pricing.domain import Category
from pricing.recursion import is_ancestor, in_scope, ancestry

phone = Category("Phone")
smart_phone = Category("SmartPhone", phone)
flagship = Category("Flagship", smart_phone)
computer = Category("Computer")


def test_is_ancestor_direct_and_transitive():
    assert is_ancestor(phone, smart_phone)
    assert is_ancestor(phone, flagship)
    assert is_ancestor(smart_phone, flagship)


def test_is_ancestor_is_strict():
    """Категория не является предком самой себя"""
    assert not is_ancestor(phone, phone)
    assert not is_ancestor(flagship, phone)
    assert not is_ancestor(computer, smart_phone)


def test_is_ancestor_none_node():
    assert not is_ancestor(phone, None)


def test_in_scope_same_or_descendant():
    assert in_scope(phone, phone)
    assert in_scope(phone, flagship)
    assert not in_scope(smart_phone, phone)
    assert not in_scope(computer, smart_phone)


def test_in_scope_uses_identity_not_title():
    other_phone = Category("Phone")
    assert not in_scope(other_phone, smart_phone)


def test_ancestry_root_last():
    assert ancestry(flagship) == (flagship, smart_phone, phone)
    assert ancestry(computer) == (computer,)
    assert ancestry(None) == ()


def test_cycle_terminates():
    a = Category("A")
    b = Category("B", a)
    object.__setattr__(a, "parent", b)  # a -> b -> a
    outsider = Category("Outsider")

    assert not is_ancestor(outsider, a)
    assert is_ancestor(b, a)
    assert ancestry(a) == (a, b)

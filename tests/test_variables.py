import string

import pytest

from symcalc.variables import AtomicKind, VariableSymbol


def test_render_is_bijection_onto_lowercase_letters():
    rendered = [v.render() for v in VariableSymbol]
    assert len(rendered) == 26
    assert sorted(rendered) == list(string.ascii_lowercase)


@pytest.mark.parametrize("letter", list(string.ascii_lowercase))
def test_from_char_inverts_render(letter):
    symbol = VariableSymbol.from_char(letter)
    assert symbol.render() == letter
    assert str(symbol) == letter


@pytest.mark.parametrize("bad", ["", "X", "xy", "1", "é"])
def test_from_char_rejects_non_letters(bad):
    with pytest.raises(ValueError):
        VariableSymbol.from_char(bad)


def test_conventional_roles():
    assert VariableSymbol.independent() is VariableSymbol.x
    assert VariableSymbol.dependent() is VariableSymbol.y
    assert VariableSymbol.e.is_euler_alias()
    assert not VariableSymbol.x.is_euler_alias()


def test_atomic_kind_is_totally_ordered():
    assert AtomicKind.LITERAL < AtomicKind.CONSTANT < AtomicKind.VAR < AtomicKind.EXPRESSION
    assert sorted(AtomicKind, reverse=True)[0] is AtomicKind.EXPRESSION

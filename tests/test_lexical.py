import io

import pytest

from symtab.hashing import sdbm_hash
from symtab.lexical import (
    LexScopeTable,
    LexSymbolInfo,
    LexSymbolTable,
    sdbm_hash32,
)


def _zero(_name):
    return 0


# --- hashing -----------------------------------------------------------------


def test_sdbm_hash32_empty_is_zero():
    assert sdbm_hash32("") == 0


def test_sdbm_hash32_single_char_is_its_code():
    assert sdbm_hash32("a") == ord("a")


@pytest.mark.parametrize("text", ["main", "x", "counter_1", "a" * 200, "héllo"])
def test_sdbm_hash32_matches_reduced_hash_with_full_modulus(text):
    assert sdbm_hash32(text) == sdbm_hash(text, 2**32)


@pytest.mark.parametrize("text", ["zzzzzzzzzzzzzzzzzzzz", "Q" * 50])
def test_sdbm_hash32_fits_in_32_bits(text):
    assert 0 <= sdbm_hash32(text) < 2**32


# --- symbols -----------------------------------------------------------------


def test_symbol_render():
    assert LexSymbolInfo("x", "ID").render() == "< x : ID >"
    assert str(LexSymbolInfo("if", "IF")) == "< if : IF >"


# --- scope -------------------------------------------------------------------


def test_scope_insert_and_duplicate_reports_position():
    scope = LexScopeTable("1", 3, None, _zero)
    out = io.StringIO()
    assert scope.insert("a", "ID", out) is True
    assert scope.insert("b", "ID", out) is True
    assert out.getvalue() == ""
    assert scope.insert("b", "NUM", out) is False
    assert out.getvalue() == "< b : ID > already exists in ScopeTable# 1 at position 0, 1\n\n"
    assert len(scope) == 2


def test_scope_counts_collisions():
    scope = LexScopeTable("1", 4, None, _zero)
    out = io.StringIO()
    scope.insert("a", "ID", out)
    assert scope.collisions == 0
    scope.insert("b", "ID", out)
    scope.insert("c", "ID", out)
    assert scope.collisions == 2


def test_scope_lookup_missing_returns_none_silently():
    scope = LexScopeTable("1", 7)
    out = io.StringIO()
    assert scope.lookup("nothing", out) is None
    assert out.getvalue() == ""


def test_scope_delete():
    scope = LexScopeTable("1", 5)
    out = io.StringIO()
    scope.insert("a", "ID", out)
    assert scope.delete("a") is True
    assert scope.delete("a") is False
    assert scope.lookup("a", out) is None
    assert list(scope) == []


def test_scope_write_shows_only_nonempty_buckets():
    scope = LexScopeTable("1", 3, None, _zero)
    out = io.StringIO()
    scope.insert("a", "ID", out)
    scope.insert("b", "NUM", out)
    text = io.StringIO()
    scope.write(text)
    assert text.getvalue() == "ScopeTable # 1\n0 --> < a : ID >< b : NUM >\n"


def test_scope_rejects_nonpositive_buckets():
    with pytest.raises(ValueError):
        LexScopeTable("1", 0)


# --- symbol table ------------------------------------------------------------


def test_table_announces_scopes_on_stdout(capsys):
    table = LexSymbolTable(7, "1", io.StringIO())
    table.enter_scope()
    table.exit_scope()
    table.enter_scope()
    captured = capsys.readouterr().out
    assert captured == (
        "\tScopeTable# 1 created\n"
        "\tScopeTable# 1.1 created\n"
        "\tScopeTable# 1.1 removed\n"
        "\tScopeTable# 1.1.1 created\n"
    )
    assert table.current_scope.scope_id == "1.1.1"


def test_table_lookup_searches_parent_scopes():
    out = io.StringIO()
    table = LexSymbolTable(7, "1", out)
    table.insert("x", "ID")
    table.enter_scope()
    entry = table.lookup("x")
    assert entry == LexSymbolInfo("x", "ID")
    assert "ScopeTable# 1 at position" in out.getvalue()


def test_table_lookup_missing_reports_on_stdout(capsys):
    table = LexSymbolTable(7, "1", io.StringIO())
    capsys.readouterr()
    assert table.lookup("ghost") is None
    assert capsys.readouterr().out == "\t'ghost' not found in any of the ScopeTables\n"


def test_table_inner_scope_allows_shadowing():
    out = io.StringIO()
    table = LexSymbolTable(7, "1", out)
    assert table.insert("x", "ID") is True
    table.enter_scope()
    assert table.insert("x", "NUM") is True
    assert table.lookup("x").type == "NUM"
    table.exit_scope()
    assert table.lookup("x").type == "ID"


def test_table_collision_ratio_and_reset():
    table = LexSymbolTable(2, "1", io.StringIO(), _zero)
    table.insert("a", "ID")
    table.insert("b", "ID")
    table.insert("b", "ID")
    assert table.collision_count == 1
    assert table.collision_ratio() == pytest.approx(0.5)
    table.reset_collision_count()
    assert table.collision_count == 0
    assert table.collision_ratio() == 0.0


def test_table_remove():
    table = LexSymbolTable(5, "1", io.StringIO())
    table.insert("a", "ID")
    assert table.remove("a") is True
    assert table.remove("a") is False


def test_table_print_current_scope():
    table = LexSymbolTable(3, "1", io.StringIO(), _zero)
    table.insert("a", "ID")
    target = io.StringIO()
    table.print_current_scope(target)
    assert target.getvalue() == "ScopeTable # 1\n0 --> < a : ID >\n"


def test_table_print_all_scopes_innermost_first():
    out = io.StringIO()
    table = LexSymbolTable(3, "1", out, _zero)
    table.insert("a", "ID")
    table.enter_scope()
    table.insert("b", "ID")
    out.seek(0)
    out.truncate()
    table.print_all_scopes()
    assert out.getvalue() == (
        "ScopeTable # 1.1\n0 --> < b : ID >\n"
        "ScopeTable # 1\n0 --> < a : ID >\n"
        "\n"
    )


def test_table_without_scopes_raises():
    table = LexSymbolTable(3, "1", io.StringIO())
    table.exit_scope()
    assert table.current_scope is None
    with pytest.raises(RuntimeError):
        table.insert("a", "ID")
    with pytest.raises(RuntimeError):
        table.remove("a")
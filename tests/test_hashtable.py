import string

import pytest

from drills.hashtable import (
    DEFAULT_INPUT,
    TABLE_SIZE,
    HashTable,
    HashTableBuilder,
    OpToken,
    OpType,
    Parser,
    main,
)


def test_parser_keeps_only_valid_commands():
    parser = Parser("Aapple Xfoo A Dtoolongkeyname Aabc1 DBig Dkiwi")
    assert len(parser) == 2
    assert list(parser) == [
        OpToken(OpType.ADD, "apple"),
        OpToken(OpType.DELETE, "kiwi"),
    ]


def test_parser_accepts_ten_letter_key_and_rejects_eleven():
    parser = Parser("A" + "a" * 10 + " A" + "b" * 11)
    assert [token.key for token in parser] == ["a" * 10]


def test_parser_str_format():
    parser = Parser("Aapple Dkiwi")
    assert str(parser) == "[Add, apple] [Delete, kiwi] "


def test_parser_tokenize_appends():
    parser = Parser("Aapple")
    parser.tokenize("Dapple  Akiwi")
    assert [token.key for token in parser] == ["apple", "apple", "kiwi"]


def test_add_then_find_returns_same_slot():
    table = HashTable()
    assert table.add("apple") is True
    index = table.find("apple")
    assert f"[{index:>2}]:: [   Occupied, {'apple':>10}]" in str(table)


def test_collision_probes_next_slot():
    table = HashTable()
    table.add("apple")
    table.add("grape")
    assert table.find("grape") == (table.find("apple") + 1) % TABLE_SIZE


def test_probing_wraps_around():
    table = HashTable()
    table.add("fuzz")
    table.add("jazz")
    assert table.find("jazz") == (table.find("fuzz") + 1) % TABLE_SIZE
    assert table.find("jazz") < table.find("fuzz")


def test_duplicate_add_uses_one_slot():
    table = HashTable()
    assert table.add("apple")
    assert table.add("apple")
    assert str(table).count("apple") == 1


def test_delete_leaves_tombstone_then_reused():
    table = HashTable()
    table.add("apple")
    index = table.find("apple")
    assert table.delete("apple") is True
    assert "Tombstoned" in str(table)
    table.add("grape")
    assert table.find("grape") == index
    assert "Tombstoned" not in str(table)


def test_delete_missing_key_changes_nothing():
    table = HashTable()
    before = str(table)
    assert table.delete("kiwi") is True
    assert str(table) == before


def test_full_table_rejects_new_keys():
    table = HashTable()
    keys = [letter + "a" for letter in string.ascii_lowercase]
    assert all(table.add(key) for key in keys)
    assert table.find("zza") is None
    assert table.add("zza") is False
    assert table.delete("zza") is False
    assert table.add("ma") is True


@pytest.mark.parametrize("key", ["", "abc1", "abC"])
def test_find_rejects_bad_keys(key):
    with pytest.raises(ValueError):
        HashTable().find(key)


def test_execute_reports_each_command():
    table = HashTable("Aapple Dapple")
    assert table.execute() == ["Add: apple true", "Delete: apple true"]
    assert table.log == ["Add: apple true", "Delete: apple true"]


def test_tokenize_chains_and_execute_runs_all():
    table = HashTable("Aapple").tokenize("Akiwi")
    assert table.execute() == ["Add: apple true", "Add: kiwi true"]


def test_empty_table_str_layout():
    lines = str(HashTable()).splitlines()
    assert len(lines) == 3 + TABLE_SIZE
    assert lines[0] == "========== HashTable internal parser state =========="
    assert lines[1] == ""
    assert lines[2] == "============== HashTable internal state =============="
    assert lines[3] == "[ 0]:: [  NeverUsed, " + " " * 10 + "]"
    assert lines[-1].startswith("[25]:: [")


def test_builder_executes_when_asked():
    table = (
        HashTableBuilder()
        .with_initial_data("Aapple Dapple Aorange")
        .execute_tokenized_data(True)
        .build()
    )
    text = str(table)
    assert "Tombstoned" not in text
    assert f"Occupied, {'orange':>10}]" in text
    assert table.log[-1] == "Add: orange true"


def test_builder_without_execution_only_parses():
    table = HashTableBuilder().with_initial_data("Aapple").build()
    text = str(table)
    assert "Occupied" not in text
    assert "[Add, apple] " in text
    assert table.log == []


def test_main_runs_default_commands(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    for key in DEFAULT_INPUT.split():
        assert key[1:] in out
    assert "Delete: apple true" in out
    assert "Add: orange true" in out


def test_main_uses_arguments(capsys):
    assert main(["Akiwi", "Dkiwi"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Add: kiwi true\nDelete: kiwi true\n")
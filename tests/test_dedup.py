import io

from gopl import dedup


def test_keeps_first_occurrences_in_order():
    assert list(dedup.dedup(["b\n", "a\n", "b\n", "c\n", "a"])) == ["b", "a", "c"]


def test_output_is_distinct():
    lines = ["x", "y", "x", "y", "z"]
    out = list(dedup.dedup(lines))
    assert len(out) == len(set(out)) == len(set(lines))


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("one\none\ntwo\n"))
    assert dedup.main([]) == 0
    assert capsys.readouterr().out == "one\ntwo\n"
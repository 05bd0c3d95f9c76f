# tests/test_cli.py
import pytest

from tfidf_engine.cli import format_lookup, format_results, format_score, main
from tfidf_engine.ranker import RankedDocument


@pytest.mark.parametrize("score,expected", [
    (0.9486832980505138, "0.94868"),
    (0.7071067811865475, "0.70711"),
    (0.5, "0.5"),
    (1.0, "1"),
    (0.000001, "0"),
])
def test_format_score(score, expected):
    assert format_score(score) == expected


def test_format_results():
    lines = format_results("cat dog", [RankedDocument(3, 0.9486832980505138), RankedDocument(1, 0.5)])
    assert lines == [
        "Files that contain the query: cat dog",
        "Rank 1: file3.txt (Cosine Similarity: 0.94868)",
        "Rank 2: file1.txt (Cosine Similarity: 0.5)",
    ]


def test_format_results_empty():
    assert format_results("xyzzy", []) == ["No files contain the query: xyzzy"]


def test_format_lookup():
    assert format_lookup("cat", [1, 3]) == ["Files that contain the term: cat", "file1.txt", "file3.txt"]
    assert format_lookup("xyzzy", []) == ["No files contain the term: xyzzy"]


def test_main_query(toy_dir, capsys):
    assert main(["--data-dir", str(toy_dir), "--query", "Cat Dog"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Files that contain the query: cat dog",
        "Rank 1: file3.txt (Cosine Similarity: 0.94868)",
        "Rank 2: file1.txt (Cosine Similarity: 0.70711)",
        "Rank 3: file2.txt (Cosine Similarity: 0.70711)",
    ]


def test_main_prompts_for_query(toy_dir, capsys, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: "xyzzy")
    assert main(["--data-dir", str(toy_dir)]) == 0
    assert capsys.readouterr().out.strip() == "No files contain the query: xyzzy"


def test_main_topk(toy_dir, capsys):
    main(["--data-dir", str(toy_dir), "--query", "cat dog", "--topk", "1"])
    out = capsys.readouterr().out.splitlines()
    assert out[1:] == ["Rank 1: file3.txt (Cosine Similarity: 0.94868)"]


def test_main_lookup(toy_dir, capsys):
    assert main(["--data-dir", str(toy_dir), "--lookup", "CAT"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Files that contain the term: cat", "file1.txt", "file3.txt"]


def test_main_unreadable_file_is_warning(toy_dir, capsys, caplog):
    assert main(["--data-dir", str(toy_dir), "--num-docs", "4", "--query", "cat"]) == 0
    assert "doc 4 unavailable" in caplog.text
    assert capsys.readouterr().out.startswith("Files that contain the query: cat")


def test_main_missing_data_dir(tmp_path, capsys):
    assert main(["--data-dir", str(tmp_path / "nope"), "--query", "cat"]) == 1
    assert "Data directory not found" in capsys.readouterr().err


def test_main_negative_topk_rejected(toy_dir, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--data-dir", str(toy_dir), "--query", "cat", "--topk", "-1"])
    assert exc.value.code == 2
    assert "must be >= 0" in capsys.readouterr().err


def test_main_closed_stdin_is_empty_query(toy_dir, capsys, monkeypatch):
    def closed(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    assert main(["--data-dir", str(toy_dir)]) == 0
    assert capsys.readouterr().out.strip() == "No files contain the query:"

from pathlib import Path
from clidle.datasets import validate_wordlists, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    sol = tmp_path / "solutions.txt"
    words = tmp_path / "words.txt"
    _write(sol, ["crane", "raise", "stare"])
    _write(words, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlists(5, str(sol), str(words))
    assert rep["passed"] is True
    assert rep["solutions_subset_words"] is True
    assert rep["words"]["count"] == 5
    s = pretty_summary(rep)
    assert "N=5" in s and "solutions⊆words=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    sol = tmp_path / "solutions.txt"
    words = tmp_path / "words.txt"
    # 'crane' (len 5) invalid for N=6, '???' invalid chars, blank line invalid
    sol.write_text("raiser\ncrane\n???\n\n", encoding="utf-8")
    words.write_text("raiser\nplanet\npalate\n", encoding="utf-8")

    rep = validate_wordlists(6, str(sol), str(words))
    assert rep["passed"] is False
    assert rep["solutions"]["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    sol = tmp_path / "solutions.txt"
    words = tmp_path / "words.txt"
    _write(sol, ["crane", "raise", "stare"])
    _write(words, ["crane", "stare"])  # missing 'raise'

    rep = validate_wordlists(5, str(sol), str(words))
    assert rep["passed"] is False
    assert rep["solutions_subset_words"] is False
    assert any("subset" in msg for msg in rep["issues"])


def test_validate_wordlists_duplicates_and_crlf(tmp_path: Path):
    sol = tmp_path / "solutions.txt"
    words = tmp_path / "words.txt"
    sol.write_bytes(b"crane\r\ncrane\r\n")
    words.write_bytes(b"crane\nslate")

    rep = validate_wordlists(5, str(sol), str(words))
    assert rep["solutions"]["count"] == 2
    assert rep["solutions"]["unique_count"] == 1
    assert rep["words"]["count"] == 2
    assert "solutions contains duplicate lines" in rep["issues"]


def test_validate_wordlists_missing_file(tmp_path: Path):
    rep = validate_wordlists(5, str(tmp_path / "a.txt"), str(tmp_path / "b.txt"))
    assert rep["passed"] is False
    assert len(rep["issues"]) == 2


def test_line_totals_count_blank_and_unterminated_lines(tmp_path: Path):
    sol = tmp_path / "solutions.txt"
    words = tmp_path / "words.txt"
    sol.write_bytes(b"crane\n\nslate\n")
    words.write_bytes(b"crane\nslate")  # no final newline

    rep = validate_wordlists(5, str(sol), str(words))
    assert rep["solutions"]["lines"] == 3
    assert rep["solutions"]["invalid_lines"] == 1
    assert rep["words"]["lines"] == 2
    assert rep["words"]["invalid_lines"] == 0
    assert "solutions=2/3 lines" in pretty_summary(rep)


def test_missing_file_skips_subset_check(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["crane"])
    rep = validate_wordlists(5, str(tmp_path / "nope.txt"), str(words))
    assert rep["issues"] == [f"solutions file not found: {tmp_path / 'nope.txt'}"]
    assert rep["solutions_subset_words"] is False
    assert rep["words"]["count"] == 1

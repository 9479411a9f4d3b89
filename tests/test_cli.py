import hashlib

from shadigest.cli import NOT_FOUND, file_hash, main


def test_file_hash_matches_reference(tmp_path):
    content = b"some file content\n" * 20
    path = tmp_path / "data.bin"
    path.write_bytes(content)
    assert file_hash(str(path)) == hashlib.sha256(content).hexdigest()


def test_file_hash_missing_file(tmp_path):
    assert file_hash(str(tmp_path / "missing.txt")) == "file not found!"
    assert NOT_FOUND == "file not found!"


def test_main_without_arguments(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert "Atleast one file is required" in captured.err
    assert captured.out == ""


def test_main_prints_each_file(tmp_path, capsys):
    first = tmp_path / "a.txt"
    first.write_bytes(b"abc")
    second = tmp_path / "b.txt"
    second.write_bytes(b"")
    missing = tmp_path / "nope.txt"
    assert main([str(first), str(second), str(missing)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"{first}: {hashlib.sha256(b'abc').hexdigest()}",
        f"{second}: {hashlib.sha256(b'').hexdigest()}",
        f"{missing}: file not found!",
    ]
"""Tests for main entry point."""

import asyncio
import bcrypt
import pytest
from main import load_passwords_from_file, build_parser, main
from shared.domain.consts import CharacterPool
from shared.implementations.schemes import Sha256Scheme


def run(argv):
    return asyncio.run(main(argv))


class TestLoadPasswordsFromFile:
    """Tests for loading passwords from file."""

    def test_load_passwords(self, tmp_path):
        """Test loading one password per line."""
        test_file = tmp_path / "passwords.txt"
        test_file.write_text("alpha\nbravo\ncharlie\n")
        assert load_passwords_from_file(str(test_file)) == ["alpha", "bravo", "charlie"]

    def test_skips_empty_lines(self, tmp_path):
        """Test that empty lines are skipped."""
        test_file = tmp_path / "passwords.txt"
        test_file.write_text("alpha\n\nbravo\n")
        assert load_passwords_from_file(str(test_file)) == ["alpha", "bravo"]

    def test_keeps_inner_whitespace(self, tmp_path):
        """Test that spaces are part of the password."""
        test_file = tmp_path / "passwords.txt"
        test_file.write_text(" two words \r\n")
        assert load_passwords_from_file(str(test_file)) == [" two words "]

    def test_missing_file_raises(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_passwords_from_file(str(tmp_path / "missing.txt"))


class TestParser:
    """Tests for argument parsing."""

    def test_generate_defaults(self):
        """Test generate defaults mirror the configuration."""
        args = build_parser().parse_args(["generate"])
        assert args.length == 16
        assert args.count == 1
        assert args.include_symbols is True
        assert args.exclude_similar is False

    def test_hash_rejects_unknown_algorithm(self):
        """Test that argparse rejects unsupported algorithms."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["hash", "pw", "-a", "sha1"])


class TestMain:
    """Tests for main execution."""

    def test_generate(self, capsys):
        """Test generating several passwords."""
        assert run(["generate", "-l", "20", "-n", "3", "--no-symbols"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        allowed = set(CharacterPool.LOWERCASE + CharacterPool.UPPERCASE + CharacterPool.DIGITS)
        for line in lines:
            assert len(line) == 20
            assert set(line) <= allowed

    def test_generate_all_classes_off(self, capsys):
        """Test that an empty charset is reported and exits with 1."""
        code = run(["generate", "--no-uppercase", "--no-lowercase", "--no-digits", "--no-symbols"])
        assert code == 1
        assert "at least one character class" in capsys.readouterr().err

    def test_generate_length_out_of_range(self, capsys):
        """Test that validation errors are reported and exit with 1."""
        assert run(["generate", "-l", "2"]) == 1
        assert "error" in capsys.readouterr().err

    @pytest.mark.parametrize("count", ["0", "-3"])
    def test_generate_count_below_one(self, capsys, count):
        """Test that a non-positive count is an error rather than silent success."""
        assert run(["generate", "-n", count]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "--count must be at least 1" in captured.err

    def test_analyze(self, capsys):
        """Test analyzing a single password."""
        assert run(["analyze", "Tr0ub4dor&3Zy"]) == 0
        out = capsys.readouterr().out
        assert " 90 very strong" in out

    def test_analyze_prints_feedback(self, capsys):
        """Test that feedback lines follow the score line."""
        assert run(["analyze", "abc"]) == 0
        out = capsys.readouterr().out
        assert "use at least 8 characters" in out
        assert "avoid common sequences" in out

    def test_analyze_without_input(self, capsys):
        """Test that a missing password is an error."""
        assert run(["analyze"]) == 1
        assert "Provide a password" in capsys.readouterr().err

    def test_analyze_missing_file(self, capsys, tmp_path):
        """Test that a missing input file exits with 1."""
        assert run(["analyze", "-f", str(tmp_path / "nope.txt")]) == 1
        assert "input file not found" in capsys.readouterr().err

    def test_hash_sha256(self, capsys):
        """Test hashing with sha256."""
        assert run(["hash", "password", "-a", "sha256"]) == 0
        out = capsys.readouterr().out.strip()
        assert out == "5e884898da28047151d0e56f8dc6292773603d0d6aabbdd62a11ef721d1542d8"

    def test_hash_md5_warns(self, capsys):
        """Test that md5 prints an insecurity warning."""
        assert run(["hash", "password", "-a", "md5"]) == 0
        captured = capsys.readouterr()
        assert captured.out.strip() == "5f4dcc3b5aa765d61d8327deb882cf99"
        assert "insecure" in captured.err

    def test_hash_warning_follows_scheme_flag(self, capsys, monkeypatch):
        """Test that the warning comes from the scheme flag, not the algorithm name."""
        monkeypatch.setattr(Sha256Scheme, "insecure", True)
        assert run(["hash", "password", "-a", "sha256"]) == 0
        assert "sha256 is insecure" in capsys.readouterr().err

    def test_hash_sha512_no_warning(self, capsys):
        """Test that secure algorithms print nothing to stderr."""
        assert run(["hash", "password", "-a", "sha512"]) == 0
        assert "insecure" not in capsys.readouterr().err

    def test_hash_file_bcrypt_keeps_order(self, capsys, tmp_path):
        """Test batch bcrypt hashing prints digests in input order."""
        test_file = tmp_path / "passwords.txt"
        test_file.write_text("first\nsecond\nthird\n")

        assert run(["hash", "-f", str(test_file), "-a", "bcrypt", "-c", "4"]) == 0
        digests = capsys.readouterr().out.splitlines()
        assert len(digests) == 3
        for password, digest in zip(["first", "second", "third"], digests):
            assert bcrypt.checkpw(password.encode(), digest.encode())

    def test_hash_invalid_cost(self, capsys):
        """Test that an out-of-range cost exits with 1."""
        assert run(["hash", "pw", "-a", "bcrypt", "-c", "20"]) == 1
        assert "between 4 and 15" in capsys.readouterr().err

"""
Tests for the jobscreen command line.
"""

import io
import json

import pytest

from jobscreen.cli import main

SCAM_POSTING = (
    "wire money now to secure this high paying remote job, $15000/month, "
    "immediate hiring!!!"
)

ACME_POSTING = (
    "Acme Corporation Inc. is hiring a Software Engineer. Visit www.acmecorp.com "
    "or email careers@acmecorp.com. Benefits include 401k, health insurance, and "
    "dental. Founded in 2005, we have 500 employees. Call (555) 123-4567."
)


@pytest.fixture
def postings(tmp_path):
    scam = tmp_path / "scam.txt"
    scam.write_text(SCAM_POSTING, encoding="utf-8")
    acme = tmp_path / "acme.txt"
    acme.write_text(ACME_POSTING, encoding="utf-8")
    return scam, acme


class TestCheck:

    def test_real_exits_zero(self, postings, capsys):
        _, acme = postings
        assert main(["check", str(acme)]) == 0
        out = capsys.readouterr().out
        assert "REAL" in out
        assert "Acme Corporation" in out

    def test_fake_exits_two(self, postings, capsys):
        scam, _ = postings
        assert main(["check", str(scam)]) == 2
        assert "REQUEST_MONEY" in capsys.readouterr().out

    def test_worst_verdict_wins(self, postings, capsys):
        scam, acme = postings
        assert main(["check", str(acme), str(scam)]) == 2

    def test_json_single(self, postings, capsys):
        _, acme = postings
        main(["check", "--json", str(acme)])
        data = json.loads(capsys.readouterr().out)
        assert data["verdict"] == "REAL"
        assert data["path"] == str(acme)

    def test_json_many(self, postings, capsys):
        scam, acme = postings
        main(["check", "--json", str(scam), str(acme)])
        data = json.loads(capsys.readouterr().out)
        assert [d["verdict"] for d in data] == ["FAKE", "REAL"]

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(SCAM_POSTING))
        assert main(["check", "-"]) == 2

    def test_missing_file(self, tmp_path, capsys):
        assert main(["check", str(tmp_path / "nope.txt")]) == 3
        assert "could not read" in capsys.readouterr().err

    def test_unreadable_path_does_not_drop_other_results(self, postings, tmp_path, capsys):
        scam, acme = postings
        missing = tmp_path / "nope.txt"
        assert main(["check", "--json", str(acme), str(missing), str(scam)]) == 3
        captured = capsys.readouterr()
        data = json.loads(captured.out)
        assert [d["path"] for d in data] == [str(acme), str(scam)]
        assert [d["verdict"] for d in data] == ["REAL", "FAKE"]
        assert "could not read" in captured.err

    def test_unreadable_path_text_mode(self, postings, tmp_path, capsys):
        _, acme = postings
        assert main(["check", str(tmp_path / "nope.txt"), str(acme)]) == 3
        assert "REAL" in capsys.readouterr().out


class TestPatternsCommand:

    def test_lists_rules(self, capsys):
        assert main(["patterns"]) == 0
        out = capsys.readouterr().out
        assert "REQUEST_MONEY" in out
        assert "STANDARD_BENEFITS" in out

    def test_family_filter(self, capsys):
        main(["patterns", "--family", "grammar"])
        out = capsys.readouterr().out
        assert "EXCESSIVE_CAPS" in out
        assert "REQUEST_MONEY" not in out

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])

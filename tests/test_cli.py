"""End-to-end tests for the ``blockmine`` command."""

from __future__ import annotations

import pytest

import blockmine.config as config
from blockmine.cli import EXIT_BAD_INPUT, EXIT_INVALID, EXIT_OK, main

CHAIN = [35, 20, 15, 25, 47, 40, 62, 55, 65, 95, 102, 117, 150, 182, 127, 219, 299, 277, 309, 576]


@pytest.fixture
def chain_file(tmp_path):
    def _write(blocks, name="chain.txt"):
        path = tmp_path / name
        path.write_text("\n".join(str(b) for b in blocks) + "\n", encoding="utf-8")
        return str(path)

    return _write


def test_reports_first_invalid_block(chain_file, capsys, engine_name):
    status = main([chain_file(CHAIN), "-w", "5", "-e", engine_name])
    out = capsys.readouterr().out
    assert status == EXIT_INVALID
    assert out.strip() == "INVALID block #15: 127"


def test_reports_every_invalid_block(chain_file, capsys):
    status = main([chain_file(CHAIN), "--window-size", "5", "--all"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert status == EXIT_INVALID
    assert lines == [
        "INVALID block #15: 127",
        "INVALID block #17: 277",
        "INVALID block #17: 309",
        "INVALID block #17: 576",
    ]


def test_valid_chain(chain_file, capsys):
    status = main([chain_file(CHAIN[:14]), "-w", "5", "--bits", "32"])
    assert status == EXIT_OK
    assert capsys.readouterr().out.strip() == "OK 14 blocks validated"


def test_chain_shorter_than_window(chain_file, capsys):
    status = main([chain_file(CHAIN[:3]), "-w", "5"])
    assert status == EXIT_BAD_INPUT
    assert "exactly 5 blocks" in capsys.readouterr().err


def test_malformed_line(chain_file, capsys):
    status = main([chain_file(["35", "20", "x"]), "-w", "2"])
    assert status == EXIT_BAD_INPUT
    assert "not an integer" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    status = main([str(tmp_path / "nope.txt"), "-w", "5"])
    assert status == EXIT_BAD_INPUT
    assert "Cannot read" in capsys.readouterr().err


def test_unknown_engine_is_usage_error(chain_file):
    with pytest.raises(SystemExit) as info:
        main([chain_file(CHAIN), "-e", "hash-mine"])
    assert info.value.code == 2


def test_bad_engine_from_environment_is_usage_error(chain_file, monkeypatch, capsys):
    monkeypatch.setattr(config, "ENGINE", "bogus")
    with pytest.raises(SystemExit) as info:
        main([chain_file(CHAIN), "-w", "5"])
    assert info.value.code == EXIT_BAD_INPUT
    assert "invalid engine 'bogus'" in capsys.readouterr().err


def test_bad_width_from_environment_is_usage_error(chain_file, monkeypatch, capsys):
    monkeypatch.setattr(config, "BLOCK_BITS", 12)
    with pytest.raises(SystemExit) as info:
        main([chain_file(CHAIN), "-w", "5"])
    assert info.value.code == EXIT_BAD_INPUT
    assert "invalid block width 12" in capsys.readouterr().err

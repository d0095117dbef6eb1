import pytest

from asciijack import cli
from asciijack.common.errors import AssetAllocationError
from asciijack.common.io_interface import TestIOInterface
from asciijack.config import GameConfig
from asciijack.events import EngineEventType, EventBus


@pytest.fixture
def always_stand(mocker):
    return mocker.patch("builtins.input", return_value="s")


def test_parse_args():
    args = cli.parse_args(["cards", "12", "--transcript", "t.log", "-v"])
    assert args.asset_dir == "cards"
    assert args.seed == 12
    assert args.transcript == "t.log"
    assert args.verbose is True


def test_parse_args_seed_optional():
    assert cli.parse_args(["cards"]).seed is None


def test_completed_round_exits_zero(asset_dir, always_stand, capsys):
    assert cli.main([str(asset_dir), "42"]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "YOUR CARDS:" in out
    assert "DEALERS CARDS:" in out


def test_same_seed_same_round(asset_dir, always_stand, capsys):
    cli.main([str(asset_dir), "5"])
    first = capsys.readouterr().out
    cli.main([str(asset_dir), "5"])
    assert capsys.readouterr().out == first


def test_missing_arguments():
    assert cli.main([]) == cli.EXIT_ARGUMENTS


def test_too_many_arguments(asset_dir):
    assert cli.main([str(asset_dir), "1", "2"]) == cli.EXIT_ARGUMENTS


def test_seed_must_be_integer(asset_dir):
    assert cli.main([str(asset_dir), "abc"]) == cli.EXIT_ARGUMENTS


def test_help_exits_zero():
    assert cli.main(["--help"]) == cli.EXIT_OK


def test_invalid_files(tmp_path, capsys):
    assert cli.main([str(tmp_path / "missing")]) == cli.EXIT_FILES
    assert "[ERR] Invalid File(s)." in capsys.readouterr().out


def test_malformed_files(asset_dir, capsys):
    (asset_dir / "ace.txt").write_text("ab\nc\n")
    assert cli.main([str(asset_dir)]) == cli.EXIT_FILES


def test_out_of_memory(asset_dir, mocker):
    mocker.patch("asciijack.cli.load_glyphs", side_effect=AssetAllocationError("oom"))
    io = TestIOInterface()
    assert cli.run(GameConfig(asset_dir=asset_dir), io) == cli.EXIT_MEMORY
    assert io.sent_messages == ["[ERR] Out of memory."]


def test_end_of_input_aborts(asset_dir, mocker):
    mocker.patch("asciijack.cli.GameEngine.play", side_effect=EOFError)
    errors = []
    EventBus.get_instance().on(EngineEventType.ERROR, errors.append)

    assert cli.run(GameConfig(asset_dir=asset_dir, seed=1), TestIOInterface()) == cli.EXIT_ABORTED
    assert errors[0]["error"] == "EOFError"


def test_run_with_test_interface(asset_dir):
    io = TestIOInterface()
    for _ in range(3):
        io.add_player_action("s")
    assert cli.run(GameConfig(asset_dir=asset_dir, seed=3), io) == cli.EXIT_OK
    assert io.sent_messages[0].startswith("DEALERS CARDS:")


def test_transcript(asset_dir, tmp_path, always_stand, capsys):
    transcript = tmp_path / "round.log"
    assert cli.main([str(asset_dir), "9", "--transcript", str(transcript)]) == 0
    text = transcript.read_text()
    assert "YOUR CARDS:" in text
    assert text.strip().splitlines()[-1] in {
        outcome for outcome in capsys.readouterr().out.splitlines()
    }


@pytest.mark.parametrize("target", ["no/such/round.log", "."])
def test_unwritable_transcript(asset_dir, tmp_path, target, capsys):
    transcript = tmp_path / target
    assert (
        cli.main([str(asset_dir), "1", "--transcript", str(transcript)])
        == cli.EXIT_ARGUMENTS
    )
    out = capsys.readouterr().out
    assert out == "[ERR] Cannot write transcript.\n"
    assert "YOUR CARDS:" not in out

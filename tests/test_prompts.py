import pytest

from arch_installer.errors import OperatorAbort, PreconditionError
from arch_installer.lib import prompts
from arch_installer.lib.prompts import InputCollector, Secret


def test_collect_field_reprompts_on_empty_and_whitespace(terminal):
    terminal.feed("", "   ", "\t", "omega")

    assert InputCollector().collect_field("Enter the hostname") == "omega"
    assert len(terminal.asked) == 4
    assert terminal.printed.count("Input cannot be empty. Please try again.") == 3


def test_collect_field_strips_surrounding_whitespace(terminal):
    terminal.feed("  /dev/sda \n")
    assert InputCollector().collect_field("Disk") == "/dev/sda"


def test_collect_secret_reprompts_until_entries_match(terminal):
    terminal.feed("abc", "abd", "", "", "pw", "pw")

    secret = InputCollector().collect_secret("Enter root password")

    assert secret.reveal() == "pw"
    assert [kind for kind, _ in terminal.asked] == ["password"] * 6
    assert terminal.asked[1][1] == "Confirm Enter root password:"
    assert terminal.printed == [
        "Passwords do not match. Please try again.",
        "Password cannot be empty. Please try again.",
    ]


def test_secret_value_never_shown():
    s = Secret("hunter2")
    assert "hunter2" not in repr(s)
    assert "hunter2" not in str(s)
    assert "hunter2" not in f"{s}"
    assert s == Secret("hunter2")


def test_collect_validated_device_rejects_regular_file(terminal, tmp_path):
    not_a_device = tmp_path / "sdz"
    not_a_device.write_text("")
    terminal.feed(str(not_a_device))

    with pytest.raises(PreconditionError) as exc:
        InputCollector().collect_validated_device("Enter the disk", "disk")

    assert "Invalid disk" in str(exc.value)
    assert len(terminal.asked) == 1


def test_collect_validated_device_rejects_missing_path(terminal):
    terminal.feed("/dev/does-not-exist-42")
    with pytest.raises(PreconditionError):
        InputCollector().collect_validated_device("Enter the EFI partition", "EFI partition")


def test_collect_validated_device_accepts_block_device(terminal, monkeypatch):
    monkeypatch.setattr(prompts, "is_block_device", lambda path: path == "/dev/sdX1")
    terminal.feed("", "/dev/sdX1")

    assert InputCollector().collect_validated_device("EFI", "EFI partition") == "/dev/sdX1"


def test_cancelled_prompt_is_operator_abort(terminal):
    terminal.feed(None)
    with pytest.raises(OperatorAbort):
        InputCollector().collect_field("Hostname")


def test_confirm_returns_answer(terminal):
    terminal.feed(True, False)
    collector = InputCollector()
    assert collector.confirm("Proceed?") is True
    assert collector.confirm("Proceed?") is False


def test_pause_interrupt_is_operator_abort(terminal):
    terminal.interrupt_pause = True
    with pytest.raises(OperatorAbort):
        InputCollector().pause("Press any key...")


def test_pause_key_press_continues(terminal):
    InputCollector().pause("Press any key...")
    assert terminal.pauses == ["Press any key..."]

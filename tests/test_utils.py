import pytest

from ec2_lifecycle.utils import Spinner


def test_spinner_prints_done_text(capsys):
    with Spinner(text="Waiting", done_text="✅ Done"):
        pass

    assert "✅ Done (0s)" in capsys.readouterr().out


def test_spinner_prints_fail_text_and_reraises(capsys):
    with pytest.raises(RuntimeError):
        with Spinner(text="Waiting", fail_text="❗ Failed"):
            raise RuntimeError("boom")

    out = capsys.readouterr().out
    assert "❗ Failed" in out
    assert "Complete" not in out


def test_spinner_reports_cancellation(capsys):
    with pytest.raises(KeyboardInterrupt):
        with Spinner(text="Waiting"):
            raise KeyboardInterrupt

    assert "Operation cancelled." in capsys.readouterr().out


def test_spinner_skips_frames_when_not_a_terminal(capsys, mocker):
    thread_cls = mocker.patch("ec2_lifecycle.utils.threading.Thread")

    with Spinner(text="Waiting"):
        pass

    thread_cls.assert_not_called()
    assert capsys.readouterr().out == "✅ Operation Complete! (0s)\n"


def test_spinner_draws_frames_on_a_terminal(mocker):
    sys_mock = mocker.patch("ec2_lifecycle.utils.sys")
    sys_mock.stdout.isatty.return_value = True
    thread_cls = mocker.patch("ec2_lifecycle.utils.threading.Thread")
    echo = mocker.patch("ec2_lifecycle.utils.click.echo")

    with Spinner(text="Waiting", done_text="✅ Done"):
        pass

    thread_cls.assert_called_once()
    thread_cls.return_value.start.assert_called_once()
    thread_cls.return_value.join.assert_called_once()
    assert echo.call_args_list[-1].args == ("✅ Done (0s)",)

import subprocess

import pytest

from redwall.screen import Screen, ScreenError, parse_xrandr

XRANDR = (
    "Screen 0: minimum 320 x 200, current 4480 x 1440, maximum 16384 x 16384\n"
    "HDMI-1 connected 1920x1080+2560+0 (normal left inverted right x axis y axis) 527mm x 296mm\n"
    "   1920x1080     60.00*+\n"
    "DP-1 connected primary 2560x1440+0+0 (normal left inverted right x axis y axis) 597mm x 336mm\n"
    "   2560x1440     59.95*+\n"
    "DP-2 disconnected (normal left inverted right x axis y axis)\n"
)


def test_parse_xrandr_picks_primary():
    assert parse_xrandr(XRANDR) == Screen(width=2560, height=1440)


def test_parse_xrandr_without_primary():
    output = XRANDR.replace(" connected primary ", " connected ")
    with pytest.raises(ScreenError, match="no primary display found"):
        parse_xrandr(output)


def test_parse_xrandr_empty_output():
    with pytest.raises(ScreenError):
        parse_xrandr("")


def test_parse_xrandr_primary_without_mode_is_zero():
    output = "eDP-1 connected primary (normal left inverted right x axis y axis)\n"
    assert parse_xrandr(output) == Screen(width=0, height=0)


def test_parse_xrandr_malformed_resolution():
    output = "eDP-1 connected primary 1366xwide+0+0 (normal)\n"
    with pytest.raises(ScreenError, match="no valid screen resolution found"):
        parse_xrandr(output)


def test_detect_runs_xrandr(monkeypatch):
    calls = []

    def fake_run(args, **kwargs):
        calls.append(args)
        return subprocess.CompletedProcess(args, 0, stdout=XRANDR, stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert Screen.detect() == Screen(2560, 1440)
    assert calls == [["xrandr"]]


def test_detect_propagates_command_failure(monkeypatch):
    def fake_run(args, **kwargs):
        raise subprocess.CalledProcessError(1, args)

    monkeypatch.setattr(subprocess, "run", fake_run)
    with pytest.raises(subprocess.CalledProcessError):
        Screen.detect()
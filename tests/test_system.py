import sys

from throttler.util import system


def test_run_action_through_shell(tmp_path):
    marker = tmp_path / "ran"
    rc = system.run_action(f"touch '{marker}' && exit 4")
    assert rc == 4
    assert marker.exists()


def test_empty_action_is_a_no_op():
    assert system.run_action("") == 0
    assert system.run_action("", shell=False) == 0


def test_run_action_without_shell(tmp_path):
    marker = tmp_path / "no shell"
    rc = system.run_action(
        f"{sys.executable} -c 'import pathlib, sys; pathlib.Path(sys.argv[1]).touch()' '{marker}'",
        shell=False,
    )
    assert rc == 0
    assert marker.exists()


def test_missing_executable_without_shell():
    assert system.run_action("definitely-not-a-real-binary-xyz", shell=False) == 127


def test_cache_directory_honours_xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))
    cache_dir = system.get_cache_directory()
    assert cache_dir == tmp_path / "throttler"
    assert cache_dir.is_dir()

"""Tests for logctl.cli - global flags, dispatch and exit codes."""

import argparse

import pytest

from logctl import levels
from logctl._version import BASE_VERSION, MAJOR, MINOR, PATCH, PHASE, VERSION
from logctl.cli import _extract_global_flags, main
from logctl.commands import build_dispatch_table
from logctl.errors import Result, exit_code
from logctl.registry import GLOBAL_CONTEXT_NAME
from logctl.store import MemoryRegistry


COMMAND_WORDS = set(build_dispatch_table())


class TestGlobalFlagExtraction:
    """Global flags are taken from the tokens before the command word."""

    def test_verbose_before_command(self):
        global_args, remaining = _extract_global_flags(
            ["-vv", "show", "netd"], COMMAND_WORDS)
        assert global_args.verbose == 2
        assert remaining == ["show", "netd"]

    def test_flags_after_command_untouched(self):
        global_args, remaining = _extract_global_flags(
            ["log", ".", "err", "--verbose"], COMMAND_WORDS)
        assert global_args.verbose == 0
        assert remaining == ["log", ".", "err", "--verbose"]

    def test_config_with_value(self):
        global_args, remaining = _extract_global_flags(
            ["--config", "/tmp/my.json", "show"], COMMAND_WORDS)
        assert global_args.config == "/tmp/my.json"
        assert remaining == ["show"]

    def test_show_with_channel(self):
        global_args, remaining = _extract_global_flags(
            ["--show", "registry:2", "show"], COMMAND_WORDS)
        assert global_args.show == ["registry:2"]
        assert remaining == ["show"]

    def test_bare_show_before_command(self):
        global_args, remaining = _extract_global_flags(
            ["--show", "set", "a", "err"], COMMAND_WORDS)
        assert global_args.show == [None]
        assert remaining == ["set", "a", "err"]

    def test_dash_help_is_a_command(self):
        global_args, remaining = _extract_global_flags(["-help"], COMMAND_WORDS)
        assert remaining == ["-help"]

    def test_unknown_leading_option_kept(self):
        _, remaining = _extract_global_flags(["-x", "show"], COMMAND_WORDS)
        assert remaining == ["-x", "show"]

    def test_config_missing_value(self):
        with pytest.raises(argparse.ArgumentError):
            _extract_global_flags(["--config"], COMMAND_WORDS)

    def test_empty_argv(self):
        global_args, remaining = _extract_global_flags([], COMMAND_WORDS)
        assert global_args.verbose == 0
        assert global_args.quiet == 0
        assert remaining == []


class TestExitCodes:

    @pytest.mark.parametrize("result,code", [
        (Result.OK, 0),
        (Result.HELP, 0),
        (Result.PARAM_ERR, 1),
        (Result.RUN_ERR, 1),
    ])
    def test_mapping(self, result, code):
        assert exit_code(result) == code


class TestMainEntryPoint:

    def test_no_command(self, capsys):
        assert main([]) == 1
        err = capsys.readouterr().err
        assert "No command specified." in err
        assert "Use -help for usage information." in err

    def test_invalid_command(self, capsys):
        assert main(["frobnicate"]) == 1
        err = capsys.readouterr().err
        assert "Invalid command 'frobnicate'" in err
        assert "Use -help for usage information." in err

    def test_help_hint_shown_once(self, capsys):
        main(["frobnicate"])
        err = capsys.readouterr().err
        assert err.count("Use -help for usage information.") == 1

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out == f"logctl {BASE_VERSION} ({VERSION})\n"

    def test_version_base_is_release_prefix(self):
        assert VERSION.startswith(BASE_VERSION + "_")
        assert BASE_VERSION == f"{MAJOR}.{MINOR}.{PATCH}-{PHASE}"

    def test_bare_show_lists_channels(self, capsys):
        assert main(["--show"]) == 0
        out = capsys.readouterr().out
        assert "Available channels:" in out
        assert "registry" in out
        assert "trace" in out and "(opt-in)" in out

    def test_bad_channel_spec(self, capsys):
        assert main(["--show", "registry:loud", "help"]) == 1
        assert "Invalid channel level 'loud'" in capsys.readouterr().err

    def test_config_missing_value(self, capsys):
        assert main(["--config"]) == 1
        assert "Use -help" in capsys.readouterr().err

    def test_verbose_shows_registry_diagnostics(self, registry, capsys):
        assert main(["-vv", "show", "netd*"], registry=registry) == 0
        err = capsys.readouterr().err
        assert "[registry] 2 of 6 contexts match 'netd*'" in err

    def test_channel_override_without_global_verbosity(self, registry, capsys):
        main(["--show", "registry:2", "show"], registry=registry)
        assert "[registry]" in capsys.readouterr().err

    def test_trace_channel_is_opt_in(self, registry, capsys):
        main(["-vvv", "show"], registry=registry)
        assert "[TRACE]" not in capsys.readouterr().err

    def test_trace_channel_enabled(self, registry, capsys):
        main(["--show", "trace:3", "show"], registry=registry)
        err = capsys.readouterr().err
        assert "[TRACE] >> logctl.resolver.collect_contexts(" in err

    def test_quiet_hides_results_keeps_errors(self, registry, capsys):
        assert main(["-QQQ", "show", "nothing*"], registry=registry) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No contexts matched 'nothing*'." in captured.err

    def test_hard_wall_silences_everything(self, registry, capsys):
        assert main(["-QQQQ", "show", "nothing*"], registry=registry) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_global_name_hint_at_verbose(self, capsys):
        reg = MemoryRegistry({GLOBAL_CONTEXT_NAME: levels.INFO})
        main(["-v", "set", GLOBAL_CONTEXT_NAME, "err"], registry=reg)
        assert "'.' is shorthand" in capsys.readouterr().err


@pytest.mark.slow
class TestFileBackedSession:
    """Commands against the JSON-file registry across invocations."""

    def test_def_persists_between_invocations(self, config_file, capsys):
        cfg = ["--config", str(config_file)]
        assert main(cfg + ["def", "mycomp", "err"]) == 0
        capsys.readouterr()
        assert main(cfg + ["show", "mycomp"]) == 0
        assert capsys.readouterr().out == "Context 'mycomp' = err\n"

    def test_default_contexts(self, config_file, capsys):
        assert main(["--config", str(config_file), "show"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Context '<global>' = info",
            "Context 'LogCtl' = info",
        ]

    def test_log_and_flush_write_message_log(self, config_file, logctl_paths):
        cfg = ["--config", str(config_file)]
        assert main(cfg + ["log", ".", "err", "disk full"]) == 0
        assert main(cfg + ["flush"]) == 0
        with open(logctl_paths["log_file"], encoding="utf-8") as f:
            lines = f.read().splitlines()
        assert lines[0].endswith(" user.err <global>: disk full")
        assert lines[1].endswith(" user.emerg LogCtl: Manually Flushing Buffers")

    def test_env_var_config(self, config_file, monkeypatch, capsys):
        monkeypatch.setenv("LOGCTL_CONFIG", str(config_file))
        assert main(["def", "envcomp"]) == 0
        assert main(["--config", str(config_file), "show", "envcomp"]) == 0
        assert "Context 'envcomp' = info" in capsys.readouterr().out

    def test_unknown_facility_is_run_error(self, tmp_path, logctl_paths, capsys):
        import json
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(dict(logctl_paths, facility="nope")),
                        encoding="utf-8")
        assert main(["--config", str(path), "show"]) == 1
        err = capsys.readouterr().err
        assert "Error opening context registry: 0x00000002 (InvalidParameter)" in err

"""CLI integration tests for listing, enabling and disabling commands."""

from click.testing import CliRunner

from sorty.commands.settings_cli import disable_cmd, enable_cmd, list_commands_cmd


class TestSettingsCli:

    def test_lists_all_commands_enabled(self, tmp_path):
        settings_file = str(tmp_path / "settings.json")
        runner = CliRunner(catch_exceptions=False)

        result = runner.invoke(list_commands_cmd, ["--settings", settings_file])

        assert result.exit_code == 0
        assert "sorty-sort-lines: Sort Lines (enabled)" in result.output
        assert "sorty-sort-tasks-by-completion: Sort Tasks (By Completion) (enabled)" in result.output

    def test_disable_then_enable(self, tmp_path):
        settings_file = str(tmp_path / "settings.json")
        runner = CliRunner(catch_exceptions=False)

        result = runner.invoke(disable_cmd, ["sorty-sort-tasks", "--settings", settings_file])
        assert result.exit_code == 0
        assert "Disabled sorty-sort-tasks" in result.output
        listing = runner.invoke(list_commands_cmd, ["--settings", settings_file]).output
        assert "sorty-sort-tasks: Sort Tasks (disabled)" in listing

        runner.invoke(enable_cmd, ["sorty-sort-tasks", "--settings", settings_file])
        listing = runner.invoke(list_commands_cmd, ["--settings", settings_file]).output
        assert "sorty-sort-tasks: Sort Tasks (enabled)" in listing

    def test_settings_path_from_environment(self, tmp_path):
        settings_file = str(tmp_path / "from-env.json")
        runner = CliRunner(catch_exceptions=False)

        runner.invoke(disable_cmd, ["sorty-sort-lines"], env={"SORTY_SETTINGS": settings_file})

        assert (tmp_path / "from-env.json").exists()

    def test_unknown_command_exits_with_error(self, tmp_path):
        settings_file = str(tmp_path / "settings.json")
        runner = CliRunner(catch_exceptions=False)

        result = runner.invoke(enable_cmd, ["sorty-shuffle", "--settings", settings_file])

        assert result.exit_code == 1
        assert "unknown command" in result.output

    def test_unwritable_settings_path_exits_with_error(self, tmp_path):
        settings_file = tmp_path / "settings.json"
        settings_file.mkdir()
        runner = CliRunner(catch_exceptions=False)

        result = runner.invoke(disable_cmd, ["sorty-sort-lines", "--settings", str(settings_file)])

        assert result.exit_code == 1
        assert "settings.json" in result.output

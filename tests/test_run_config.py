"""Tests for run configuration."""

from pathlib import Path

import pytest
import yaml

from site_percolation.run import RunConfig


def _write_config(path: Path, data) -> Path:
    path.write_text(yaml.safe_dump(data))
    return path


class TestRunConfig:
    """Tests for RunConfig loading and validation."""

    def test_from_dict(self):
        config = RunConfig({
            "run_name": "demo",
            "input": {"site_files": ["a.txt", "/abs/b.txt"]},
        })

        assert config.run_name == "demo"
        assert config.description == ""
        assert config.site_files == [Path("a.txt"), Path("/abs/b.txt")]
        assert config.stop_on_percolation is False

    def test_from_yaml_resolves_relative_paths(self, tmp_path):
        config_path = _write_config(tmp_path / "run.yaml", {
            "run_name": "demo",
            "description": "two grids",
            "input": {"site_files": ["inputs/a.txt"]},
            "options": {"stop_on_percolation": True},
        })

        config = RunConfig.from_yaml(str(config_path))

        assert config.description == "two grids"
        assert config.site_files == [tmp_path / "inputs" / "a.txt"]
        assert config.stop_on_percolation is True

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RunConfig.from_yaml(str(tmp_path / "missing.yaml"))

    @pytest.mark.parametrize('section', ['run_name', 'input'])
    def test_missing_section(self, section):
        data = {"run_name": "demo", "input": {"site_files": ["a.txt"]}}
        del data[section]

        with pytest.raises(ValueError, match=f"Missing required config section: '{section}'"):
            RunConfig(data)

    @pytest.mark.parametrize('input_section', [
        {}, {"site_files": []}, {"site_files": None}, {"site_files": "a.txt"}, {"site_files": [1, 2]},
    ])
    def test_no_site_files(self, input_section):
        with pytest.raises(ValueError, match="site_files"):
            RunConfig({"run_name": "demo", "input": input_section})

    @pytest.mark.parametrize('input_section', [None, ["a.txt"], "a.txt"])
    def test_input_not_a_mapping(self, input_section):
        with pytest.raises(ValueError, match="'input' must be a mapping"):
            RunConfig({"run_name": "demo", "input": input_section})

    def test_run_command_reports_malformed_input(self, tmp_path):
        """A list-valued input section is a config error, not a crash."""
        from click.testing import CliRunner
        from site_percolation.cli.main import cli

        config_path = _write_config(tmp_path / "run.yaml", {"run_name": "demo", "input": ["a.txt"]})

        result = CliRunner().invoke(cli, ['run', '-c', str(config_path)])

        assert result.exit_code == 1
        assert "'input' must be a mapping" in result.output

    def test_non_mapping_document(self, tmp_path):
        config_path = tmp_path / "run.yaml"
        config_path.write_text("- just\n- a list\n")

        with pytest.raises(ValueError):
            RunConfig.from_yaml(str(config_path))

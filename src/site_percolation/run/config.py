"""
Run configuration.

The RunConfig loads a YAML run definition listing the site files to replay.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional


class RunConfig:
    """
    Loads and validates a run configuration YAML.

    Example:
        config = RunConfig.from_yaml('config/run_demo.yaml')
        print(config.run_name)
        print(config.site_files)
    """

    def __init__(self, data: Dict[str, Any], base_dir: Optional[Path] = None):
        if not isinstance(data, dict):
            raise ValueError("Run config must be a mapping")
        self._data = data
        self._base_dir = base_dir
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'RunConfig':
        """Load run config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Run config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        return cls(data, base_dir=path.parent)

    def _validate(self):
        """Validate required config sections."""
        required_sections = ['run_name', 'input']
        for section in required_sections:
            if section not in self._data:
                raise ValueError(f"Missing required config section: '{section}'")

        input_section = self._data['input']
        if not isinstance(input_section, dict):
            raise ValueError("Config section 'input' must be a mapping")

        site_files = input_section.get('site_files')
        if not isinstance(site_files, list) or not site_files:
            raise ValueError("input.site_files must list at least one site file")
        if not all(isinstance(p, str) for p in site_files):
            raise ValueError("input.site_files entries must be paths")

    # --- Properties ---

    @property
    def run_name(self) -> str:
        return self._data['run_name']

    @property
    def description(self) -> str:
        return self._data.get('description', '')

    @property
    def site_files(self) -> List[Path]:
        """Site files to replay, resolved against the config file's directory."""
        paths = [Path(p) for p in self._data['input']['site_files']]
        if self._base_dir is None:
            return paths
        return [p if p.is_absolute() else self._base_dir / p for p in paths]

    @property
    def stop_on_percolation(self) -> bool:
        options = self._data.get('options') or {}
        return bool(options.get('stop_on_percolation', False))

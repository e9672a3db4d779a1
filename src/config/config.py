"""
Profile configuration for LoL Chat Tools

Profiles live in profiles/<profile>.json and are read once per tool run.
An empty default profile is created the first time it is requested; see
profiles/default.json.example for the recognised keys.

Usage:
    from config import Config
    value = Config(profile='tournament').get('parser.json_indent', 2)
"""

from typing import Dict, Any, Optional
from pathlib import Path

from lol_chat_tools.base import JSONTool, logger


class Config(JSONTool):
    """
    Read-only JSON profile with dot-notation access.

    Attributes:
        config_dir (str): Directory containing profile JSON files
        profile (str): Loaded profile name
        data (dict): Loaded configuration data
    """

    DEFAULT_CONFIG_DIR = str(Path(__file__).parent / 'profiles')
    DEFAULT_PROFILE = "default"

    def __init__(self, config_dir: str = None, profile: str = None,
                 config: Optional[Dict[str, Any]] = None):
        super().__init__(config)

        self.config_dir = config_dir or self.DEFAULT_CONFIG_DIR
        self.profile = profile or self.DEFAULT_PROFILE
        self.data = {}

        Path(self.config_dir).mkdir(parents=True, exist_ok=True)
        self._load()

    def run(self) -> Dict[str, Any]:
        """Return the loaded configuration."""
        return self.data

    def _load(self):
        """
        Load configuration from the profile JSON file.

        A missing default profile is created empty; a missing named profile
        or an unreadable file leaves the configuration empty.
        """
        profile_path = Path(self.config_dir) / f"{self.profile}.json"

        if not profile_path.exists():
            if self.profile == self.DEFAULT_PROFILE:
                self.write_json({}, str(profile_path))
                logger.info(f"Created default profile at '{profile_path}'")
            else:
                logger.warning(f"Profile '{self.profile}' not found. Using empty configuration.")
            return

        try:
            self.data = self.read_json(str(profile_path))
            logger.info(f"Loaded configuration from '{self.profile}'")
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            self.data = {}

    def get(self, path: str = None, default: Any = None) -> Any:
        """
        Get a configuration value by path using dot notation.

        Args:
            path (str, optional): Dot notation path to the value
                (e.g., "general.output_path"). If None, returns the whole
                configuration dictionary.
            default (Any, optional): Value to return if path not found.

        Returns:
            Any: The configuration value at the path, or default if not found.
        """
        if path is None:
            return self.data

        current = self.data
        for key in path.split('.'):
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current

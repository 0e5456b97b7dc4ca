"""
Groupie Tracker Configuration Loader

Loads configuration from:
1. config/groupie.yaml (or the file named by GROUPIE_CONFIG)
2. .env file - Deployment overrides (host, port, API endpoints)
"""

import os
from pathlib import Path
from dataclasses import dataclass, field

import yaml
from dotenv import load_dotenv

PACKAGE_DIR = Path(__file__).parent
TEMPLATES_DIR = PACKAGE_DIR / "web" / "templates"
STATIC_DIR = PACKAGE_DIR / "web" / "static"

DEFAULT_ARTISTS_URL = "https://groupietrackers.herokuapp.com/api/artists"
DEFAULT_RELATIONS_URL = "https://groupietrackers.herokuapp.com/api/relation"
DEFAULT_RESTRICTED_PATHS = ["/static", "/assets", "/static/assets"]


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8080


@dataclass
class ApiConfig:
    artists_url: str = DEFAULT_ARTISTS_URL
    relations_url: str = DEFAULT_RELATIONS_URL


@dataclass
class PathsConfig:
    templates_dir: Path = TEMPLATES_DIR
    static_dir: Path = STATIC_DIR


@dataclass
class Config:
    """Main configuration container."""
    site_name: str = "Groupie Tracker"
    server: ServerConfig = field(default_factory=ServerConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    restricted_paths: list[str] = field(default_factory=lambda: list(DEFAULT_RESTRICTED_PATHS))

    @classmethod
    def load(cls, config_dir: Path | None = None) -> "Config":
        """Load configuration from yaml file and environment variables.

        Resolution order:
        1. GROUPIE_CONFIG env var → that yaml file
        2. Explicit config_dir argument → config_dir/groupie.yaml
        3. Default: ../config/groupie.yaml
        """
        config_file = os.environ.get("GROUPIE_CONFIG")

        if config_file:
            yaml_path = Path(config_file)
            load_dotenv(yaml_path.parent / ".env", override=False)
        else:
            if config_dir is None:
                config_dir = PACKAGE_DIR.parent / "config"
            yaml_path = config_dir / "groupie.yaml"
            load_dotenv(config_dir.parent / ".env", override=False)

        yaml_config = {}
        if yaml_path.exists():
            with open(yaml_path) as f:
                yaml_config = yaml.safe_load(f) or {}

        server_cfg = yaml_config.get("server", {})
        api_cfg = yaml_config.get("api", {})
        paths_cfg = yaml_config.get("paths", {})

        # Env vars override yaml for deployment-specific settings
        server = ServerConfig(
            host=os.getenv("GROUPIE_HOST", server_cfg.get("host", "0.0.0.0")),
            port=int(os.getenv("GROUPIE_PORT", server_cfg.get("port", 8080))),
        )

        api = ApiConfig(
            artists_url=os.getenv("ARTISTS_URL", api_cfg.get("artists_url", DEFAULT_ARTISTS_URL)),
            relations_url=os.getenv("RELATIONS_URL", api_cfg.get("relations_url", DEFAULT_RELATIONS_URL)),
        )

        # Relative directories are taken relative to the yaml file
        paths = PathsConfig()
        if "templates_dir" in paths_cfg:
            paths.templates_dir = yaml_path.parent / paths_cfg["templates_dir"]
        if "static_dir" in paths_cfg:
            paths.static_dir = yaml_path.parent / paths_cfg["static_dir"]

        restricted_paths = yaml_config.get("restricted_paths", DEFAULT_RESTRICTED_PATHS)

        return cls(
            site_name=yaml_config.get("site_name", "Groupie Tracker"),
            server=server,
            api=api,
            paths=paths,
            restricted_paths=list(restricted_paths),
        )


def get_site_url(config: Config, host: str | None = None) -> str:
    """Generate the URL users open in a browser."""
    if host is None:
        host = "localhost"
    return f"http://{host}:{config.server.port}"

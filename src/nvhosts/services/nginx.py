"""NGINX config validation and reload."""

from __future__ import annotations

import subprocess
from pathlib import Path

from nvhosts.errors import NginxConfigError


def _run(cmd: list[str]) -> subprocess.CompletedProcess[str]:
    try:
        return subprocess.run(cmd, check=False, capture_output=True, text=True)
    except FileNotFoundError as exc:
        raise NginxConfigError(f"NGINX binary not found: {cmd[0]}") from exc


def validate_config(nginx_bin: str, conf_file: Path | None = None) -> None:
    """Run nginx -t. Raises NginxConfigError on failure."""
    cmd = [nginx_bin, "-t"]
    if conf_file is not None:
        cmd += ["-c", str(conf_file)]
    result = _run(cmd)
    if result.returncode != 0:
        raise NginxConfigError(f"NGINX config test failed:\n{result.stderr}")


def reload(nginx_bin: str) -> None:
    """Validate config, then reload NGINX."""
    validate_config(nginx_bin)
    result = _run([nginx_bin, "-s", "reload"])
    if result.returncode != 0:
        raise NginxConfigError(f"NGINX reload failed:\n{result.stderr}")

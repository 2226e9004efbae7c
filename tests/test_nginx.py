"""Tests for NGINX validation and reload."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from nvhosts.errors import NginxConfigError
from nvhosts.services import nginx


def _completed(cmd, returncode=0, stderr=""):
    return subprocess.CompletedProcess(cmd, returncode, stdout="", stderr=stderr)


class TestValidateConfig:
    def test_ok(self):
        with patch("nvhosts.services.nginx.subprocess.run", side_effect=lambda cmd, **kw: _completed(cmd)) as run:
            nginx.validate_config("nginx")
        assert run.call_args.args[0] == ["nginx", "-t"]

    def test_custom_conf(self):
        with patch("nvhosts.services.nginx.subprocess.run", side_effect=lambda cmd, **kw: _completed(cmd)) as run:
            nginx.validate_config("nginx", Path("/etc/nginx/nginx.conf"))
        assert run.call_args.args[0] == ["nginx", "-t", "-c", "/etc/nginx/nginx.conf"]

    def test_failure(self):
        failed = _completed(["nginx", "-t"], returncode=1, stderr="unknown directive")
        with patch("nvhosts.services.nginx.subprocess.run", return_value=failed):
            with pytest.raises(NginxConfigError, match="unknown directive"):
                nginx.validate_config("nginx")

    def test_missing_binary(self):
        with patch("nvhosts.services.nginx.subprocess.run", side_effect=FileNotFoundError):
            with pytest.raises(NginxConfigError, match="not found"):
                nginx.validate_config("/nope/nginx")


class TestReload:
    def test_validates_then_reloads(self):
        with patch("nvhosts.services.nginx.subprocess.run", side_effect=lambda cmd, **kw: _completed(cmd)) as run:
            nginx.reload("nginx")
        assert [c.args[0] for c in run.call_args_list] == [["nginx", "-t"], ["nginx", "-s", "reload"]]

    def test_no_reload_when_invalid(self):
        failed = _completed(["nginx", "-t"], returncode=1, stderr="bad")
        with patch("nvhosts.services.nginx.subprocess.run", return_value=failed) as run:
            with pytest.raises(NginxConfigError):
                nginx.reload("nginx")
        assert run.call_count == 1

"""Custom build hook for Hatchling to embed the git commit."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any

from hatchling.builders.hooks.plugin.interface import BuildHookInterface


class CustomBuildHook(BuildHookInterface):
    """Write joskilo/_build_info.py before building."""

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        target_path = Path(self.root) / "joskilo" / "_build_info.py"
        commit = self._run_git(["rev-parse", "HEAD"], cwd=Path(self.root))
        target_path.write_text(
            "# Auto-generated at build time.\n"
            f"COMMIT = {commit!r}\n",
            encoding="utf-8",
        )
        build_data.setdefault("artifacts", []).append("joskilo/_build_info.py")

    def _run_git(self, args: list[str], cwd: Path) -> str | None:
        try:
            out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
            return out.decode().strip() or None
        except (subprocess.CalledProcessError, FileNotFoundError, OSError):
            # Building outside a git checkout is fine
            return None

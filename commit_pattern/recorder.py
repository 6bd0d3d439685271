"""Version-control recorder interface and git implementation."""

from __future__ import annotations

import logging
import os
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class RecorderError(RuntimeError):
    """A version-control command failed."""

    def __init__(self, command: list[str], stderr: str):
        super().__init__(f"{' '.join(command)} failed: {stderr.strip()}")
        self.command = command
        self.stderr = stderr


class Recorder(Protocol):
    def stage(self, path: str) -> None: ...

    def commit_at(self, message: str, timestamp: datetime) -> None: ...


class GitRecorder:
    """Records changes by shelling out to ``git`` inside ``repo_path``."""

    def __init__(self, repo_path: Path | str = ".", git: str = "git"):
        self.repo_path = Path(repo_path)
        self.git = git

    def _run(self, args: list[str], env: dict | None = None) -> str:
        command = [self.git, *args]
        try:
            result = subprocess.run(
                command,
                cwd=self.repo_path,
                env=env,
                capture_output=True,
                text=True,
            )
        except OSError as exc:
            raise RecorderError(command, str(exc)) from exc
        if result.returncode != 0:
            raise RecorderError(command, result.stderr or result.stdout)
        return result.stdout.strip()

    def ensure_repository(self) -> None:
        """Raise RecorderError unless ``repo_path`` is inside a work tree."""

        self._run(["rev-parse", "--is-inside-work-tree"])

    def stage(self, path: str) -> None:
        self._run(["add", "--", path])

    def commit_at(self, message: str, timestamp: datetime) -> None:
        stamp = timestamp.isoformat()
        env = {**os.environ, "GIT_AUTHOR_DATE": stamp, "GIT_COMMITTER_DATE": stamp}
        self._run(["commit", "-m", message], env=env)
        logger.debug("Committed %r at %s", message, stamp)

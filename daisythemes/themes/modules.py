"""Load daisyUI theme definition modules through Node.js."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Protocol

from daisythemes.errors import DaisyThemesError, ErrorCode
from daisythemes.themes.models import StyleValue, ThemeApi, ThemeModule

logger = logging.getLogger(__name__)

DEFAULT_NODE_BINARY = "node"
REPORT_FILE_NAME = "report.json"

# argv ends with the module path and the report path. The report goes to its
# own file so theme modules are free to write to stdout.
_NODE_DRIVER = """
import { writeFileSync } from "node:fs";
import { pathToFileURL } from "node:url";

const [target, reportPath] = process.argv.slice(-2);
const prefix = process.env.DAISYTHEMES_PREFIX || "";
const mod = await import(pathToFileURL(target).href);
const theme = mod.default;

let report;
if (typeof theme !== "function") {
  report = { callable: false };
} else {
  const calls = [];
  theme({ addBase: (base) => { calls.push(base); }, prefix });
  report = { callable: true, calls };
}
writeFileSync(reportPath, JSON.stringify(report), "utf8");
"""


class ThemeModuleLoader(Protocol):
    """Anything that can acquire a theme module from a file path."""

    async def load(self, path: Path) -> ThemeModule: ...


@dataclass(frozen=True, slots=True)
class RecordedThemeFunction:
    """Replays the addBase payloads recorded while running a theme in Node."""

    calls: tuple[Mapping[str, StyleValue], ...]

    def __call__(self, api: ThemeApi) -> None:
        for base in self.calls:
            api.add_base(base)


class NodeModuleLoader:
    """Runs theme definition modules in a Node.js subprocess."""

    def __init__(self, node_binary: str = DEFAULT_NODE_BINARY, *, prefix: str = "") -> None:
        self._node_binary = node_binary
        self._prefix = prefix

    def executable(self) -> str:
        """Return the full path of the Node.js binary or raise."""
        found = shutil.which(self._node_binary)
        if found is None:
            raise DaisyThemesError(
                ErrorCode.NODE_UNAVAILABLE,
                message=f"Node.js executable not found: {self._node_binary}",
            )
        return found

    async def load(self, path: Path) -> ThemeModule:
        executable = self.executable()
        with tempfile.TemporaryDirectory(prefix="daisythemes-") as workdir:
            report_path = Path(workdir) / REPORT_FILE_NAME
            proc = await asyncio.create_subprocess_exec(
                executable,
                "--input-type=module",
                "--eval",
                _NODE_DRIVER,
                str(path),
                str(report_path),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env=self._environment(),
            )
            stdout, stderr = await proc.communicate()
            if stdout:
                logger.debug("%s wrote to stdout: %s", path, stdout.decode("utf-8", errors="replace").strip())
            if proc.returncode != 0:
                raise DaisyThemesError(
                    ErrorCode.THEME_MODULE_LOAD_FAILED,
                    message=f"Node.js failed to load {path}",
                    path=path,
                    details={"stderr": stderr.decode("utf-8", errors="replace").strip()},
                )
            report = report_path.read_bytes() if report_path.is_file() else b""
        return self._parse_report(path, report)

    def _environment(self) -> dict[str, str] | None:
        if not self._prefix:
            return None
        env = dict(os.environ)
        env["DAISYTHEMES_PREFIX"] = self._prefix
        return env

    @staticmethod
    def _parse_report(path: Path, report_bytes: bytes) -> ThemeModule:
        try:
            report = json.loads(report_bytes.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DaisyThemesError(
                ErrorCode.THEME_MODULE_LOAD_FAILED,
                message=f"Unreadable theme report from {path}: {exc}",
                path=path,
            ) from exc
        if not isinstance(report, dict) or not report.get("callable"):
            logger.debug("default export of %s is not callable", path)
            return ThemeModule(path=path, default=None)

        calls = report.get("calls") or []
        payloads = tuple(call for call in calls if isinstance(call, dict))
        return ThemeModule(path=path, default=RecordedThemeFunction(payloads))

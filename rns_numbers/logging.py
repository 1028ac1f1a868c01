"""
Structured logging for validation runs.

Produces, under one output directory:
  - manifest.json: One-time run metadata (git hash, versions, config)
  - checks.jsonl:  One record per validation check (name, passed, detail)

The codecs themselves never log or touch the filesystem; this is used
by scripts/validate_numbers.py and anything else that wants an audit
trail of table / codec checks.
"""

import json
import hashlib
import subprocess
import sys
import time
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Any, Optional

import gmpy2
import numpy as np

from .config import get_config


@dataclass
class CheckManifest:
    """Run-level metadata, saved once per run."""
    run_id: str
    timestamp: str
    git_commit: str
    config_hash: str
    python_version: str
    numpy_version: str
    gmpy2_version: str
    config: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def save(self, path: Path):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2, default=str)


def _get_git_commit() -> str:
    """Get current git commit hash, or 'unknown'."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            capture_output=True, text=True, timeout=5,
        )
        return result.stdout.strip() if result.returncode == 0 else "unknown"
    except (OSError, subprocess.SubprocessError):
        return "unknown"


def _config_hash(config: Dict[str, Any]) -> str:
    """Deterministic hash of config dict."""
    s = json.dumps(config, sort_keys=True, default=str)
    return hashlib.sha256(s.encode()).hexdigest()[:16]


def create_manifest(run_id: str,
                    config: Optional[Dict[str, Any]] = None) -> CheckManifest:
    """Create a CheckManifest with auto-detected metadata."""
    if config is None:
        config = get_config().to_dict()
    return CheckManifest(
        run_id=run_id,
        timestamp=time.strftime("%Y-%m-%dT%H:%M:%S%z"),
        git_commit=_get_git_commit(),
        config_hash=_config_hash(config),
        python_version=sys.version,
        numpy_version=np.__version__,
        gmpy2_version=gmpy2.version(),
        config=config,
    )


class CheckLogger:
    """Structured JSONL logger for a validation run.

    Writes checks.jsonl (append mode, so reruns accumulate) and keeps
    pass / fail counters for the summary.
    """

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        self._checks_path = self.output_dir / "checks.jsonl"
        self._checks_f = open(self._checks_path, 'a')

        self._passed = 0
        self._failed = 0

    @property
    def checks_path(self) -> Path:
        return self._checks_path

    def write_manifest(self, manifest: CheckManifest) -> Path:
        path = self.output_dir / "manifest.json"
        manifest.save(path)
        return path

    def log_check(self, section: str, name: str, passed: bool,
                  detail: str = "", elapsed_sec: Optional[float] = None):
        """Log one check result."""
        record: Dict[str, Any] = {
            "section": section,
            "name": name,
            "passed": bool(passed),
            "detail": detail,
            "timestamp": time.time(),
        }
        if elapsed_sec is not None:
            record["elapsed_sec"] = elapsed_sec
        self._checks_f.write(json.dumps(record, default=str) + "\n")
        self._checks_f.flush()

        if passed:
            self._passed += 1
        else:
            self._failed += 1

    def close(self):
        """Flush and close the log file."""
        if not self._checks_f.closed:
            self._checks_f.flush()
            self._checks_f.close()

    @property
    def summary(self) -> Dict[str, int]:
        return {
            "passed": self._passed,
            "failed": self._failed,
            "total": self._passed + self._failed,
        }

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

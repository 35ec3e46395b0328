import os
import time
from pathlib import Path

APPS_DIR = Path(__file__).resolve().parents[2] / "apps"
PROJECT_ROOT = APPS_DIR.parents[1]


def get_apps() -> dict[str, str]:
    return {name: str(APPS_DIR / name) for name in os.listdir(APPS_DIR)}


_cache: dict[str, tuple[float, dict[str, dict[str, str]]]] = {}
_CACHE_TTL = 60 * 60  # seconds


def get_app_paths(child_name: str) -> dict[str, dict[str, str]]:
    """Return all <child_name> module paths inside every app with TTL cache."""
    now = time.time()
    if child_name in _cache:
        ts, data = _cache[child_name]
        if now - ts < _CACHE_TTL:
            return data

    result: dict[str, dict[str, str]] = {}

    for app_name, app_path in get_apps().items():
        if not os.path.isdir(app_path) or app_name.startswith("__"):
            continue

        for root, dirs, files in os.walk(app_path):
            if os.path.basename(root) == child_name:
                file_paths = {
                    file.removesuffix(".py"): os.path.join(root, file)
                    for file in files
                    if file.endswith(".py") and "__init__" not in file
                }
                result[app_name] = file_paths
                break

    _cache[child_name] = (now, result)
    return result


def convert_path_to_model(path: str) -> str:
    """Turn a module file path into its dotted import path."""
    relative = Path(path).resolve().relative_to(PROJECT_ROOT)
    return ".".join(relative.with_suffix("").parts)

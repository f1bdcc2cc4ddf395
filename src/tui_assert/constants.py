"""Global constants."""

import pathlib


def _find_project_root() -> pathlib.Path:
    """Find the project root (directory containing tui-assert.yaml or .git).

    Search order:
      1. Walk up from cwd
      2. Walk up from the package source directory (editable install)
    Fallback: cwd
    """
    markers = ("tui-assert.yaml", ".git")

    def _search(start: pathlib.Path) -> pathlib.Path | None:
        for d in [start, *start.parents]:
            if any((d / m).exists() for m in markers):
                return d
        return None

    found = _search(pathlib.Path.cwd())
    if found:
        return found

    pkg_dir = pathlib.Path(__file__).resolve().parent  # src/tui_assert/
    found = _search(pkg_dir)
    if found:
        return found

    return pathlib.Path.cwd()


PROJECT_ROOT = _find_project_root()

CONFIG_FILE = str(PROJECT_ROOT / "tui-assert.yaml")
SESSION_DIR = str(PROJECT_ROOT / "artifacts" / "sessions")
DEFAULT_LOG_TAIL = 20

# Wait before each probe evaluation, in milliseconds. Kept as a literal
# sequence so worst-case timing is reproducible across runs.
DEFAULT_RETRY_SCHEDULE_MS = (
    0, 1, 1, 1, 1, 1, 5, 10, 20, 40, 100, 200, 500, 1000, 2000, 4000,
)

# Well-known view names of the application under test
CONFIRMATION_VIEW = "confirmation"
COMMIT_MESSAGE_VIEW = "commitMessage"
MENU_VIEW = "menu"
POPUP_VIEWS = (MENU_VIEW, CONFIRMATION_VIEW, COMMIT_MESSAGE_VIEW)

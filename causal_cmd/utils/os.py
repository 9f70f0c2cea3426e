"""Operating system utility functions for causal-cmd."""

import os

PROJECT_MARKERS: tuple[str, ...] = (".git", "setup.py")


def find_project_root(start_path: str | None = None) -> str:
    """Find the project root directory by looking for git or project markers.

    Searches upward from the given start path (or current file location)
    until it finds a directory containing a .git directory or a setup.py
    file.

    :param start_path: Directory to start searching from, defaults to current file location
    :type start_path: Optional[str]
    :return: Absolute path to the project root directory
    :rtype: str
    :raises RuntimeError: If project root cannot be found

    Example:
        >>> root = find_project_root()
        >>> print(root)  # /path/to/causal-cmd
    """
    if start_path is None:
        current_directory = os.path.abspath(os.path.dirname(__file__))
    else:
        current_directory = os.path.abspath(start_path)

    while True:
        for marker in PROJECT_MARKERS:
            if os.path.exists(os.path.join(current_directory, marker)):
                return current_directory

        parent_directory = os.path.dirname(current_directory)
        if parent_directory == current_directory:
            raise RuntimeError("Project root not found")
        current_directory = parent_directory


def resolve_catalog_path(path: str | None, env_var: str, default_path: str) -> str:
    """Pick the catalog file to load.

    An explicit path wins, then the environment variable, then the
    packaged default.

    :param path: Explicitly requested path, may be None
    :type path: Optional[str]
    :param env_var: Name of the environment variable to consult
    :type env_var: str
    :param default_path: Fallback path
    :type default_path: str
    :return: Absolute path of the catalog file
    :rtype: str
    """
    chosen = path or os.environ.get(env_var) or default_path
    return os.path.abspath(os.path.expanduser(chosen))

from importlib.metadata import version as _pkg_version, PackageNotFoundError

PACKAGE_NAME = "foldernav"

try:
    VERSION = _pkg_version(PACKAGE_NAME)
except PackageNotFoundError:
    # Fallback during source-only situations (keep in sync with pyproject)
    VERSION = "1.0.0"
ROOT_FOLDER_NAME = "root"
ROOT_ENTRIES = ("Documents", "Pictures", "file1.txt")
MAX_NAME_LENGTH = 100
HISTORY_LIMIT = None
SCRIPT_COMMENT = "#"

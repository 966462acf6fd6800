import os
from pathlib import Path
from dataclasses import dataclass

# Creates the directory (and parents) if it's missing. A plain file sitting at the path is an error.
def ensure_directory(path: Path):
    if path.exists() and not path.is_dir():
        raise NotADirectoryError(f"Expected a directory, got a file: {path}")
    path.mkdir(parents=True,exist_ok=True)
    return path

# Picks the root data folder. COUNTERBLOCK_HOME always wins, then APPDATA (windows), then a dotfolder in home.
def _resolve_data_root() -> Path:
    override = os.getenv("COUNTERBLOCK_HOME")
    if override:
        return Path(override)
    appdata = os.getenv("APPDATA")
    if appdata:
        return Path(appdata) / "CounterBlock"
    return Path.home() / ".counterblock"

# Dataclass for accessing paths across program.
@dataclass(frozen=False)
class ProjectPaths:

    data: Path

    logs: Path
    current: Path
    blocks: Path

    @staticmethod
    def build():
        # Folder for all counterblock user-specific stuff
        data = ensure_directory(_resolve_data_root())

        # Folders within the data folder
        logs = ensure_directory(data / "logs")
        current = ensure_directory(data / "current")
        blocks = ensure_directory(data / "blocks")

        return ProjectPaths(
            data = data,
            logs = logs,
            current = current,
            blocks = blocks
        )
PATHS = ProjectPaths.build()

import json
from pathlib import Path
from cb.common.logger import log
from cb.common.setup import PATHS
from cb.core.attributes import SCHEMA, Configuration, build_default_configuration
from cb.core.layout import LayoutMemory
from cb.util import now_iso

#region === Helpers and Paths ===

LAYOUT_MEMORY_PATH = PATHS.current / "layout_memory.json"
BLOCKS_DIR = PATHS.blocks

# Where a block's configuration lives by default, keyed by its client id.
def block_path(client_id) -> Path:
    return BLOCKS_DIR / f"{client_id}.json"

#endregion === Helpers and Paths ===

#region === Saving and Loading Configurations ===

# Loads one block configuration from a flat JSON mapping, filling in any attribute the file doesn't have with its
# default. Anything unreadable falls back to a fresh default configuration.
def load_configuration(path):
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            values = json.load(f)
        if not isinstance(values, dict):
            raise TypeError(f"Expected a JSON object in '{path}', got {type(values).__name__}")

        # Bare family names ("boxTPadding") carry no breakpoint and are skipped.
        family_keys = sorted(key for key in values if key in SCHEMA and SCHEMA[key].responsive)
        if family_keys:
            log.warning(f"Skipping responsive family names without a breakpoint suffix in '{path}': {', '.join(family_keys)}")
            values = {key: value for key, value in values.items() if key not in family_keys}

        config = Configuration(values)
        defaulted_values = sorted(key for key in config.keys() if key not in values)
        if defaulted_values:
            log.warning(f"Successfully loaded configuration from '{path}', but with missing values that were defaulted: {', '.join(defaulted_values)}")
        else:
            log.info(f"Successfully loaded configuration from '{path}'.")
        return config
    # Fall back to a fresh configuration in case of error, but warn in log
    except (FileNotFoundError, json.JSONDecodeError, OSError, TypeError):
        log.warning(f"Ran into an error while trying to load '{path}', falling back to a default configuration.",exc_info=True)
        return build_default_configuration()

# Write the given configuration to disk as a flat JSON mapping.
def save_configuration(config, path):
    path = Path(path)
    path.parent.mkdir(parents=True,exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2)
    log.info(f"Successfully saved configuration to '{path}'")

#endregion === Saving and Loading Configurations ===

#region === Saving and Loading Layout Memory ===

# Loads the layout memory table persisted across sessions, or an empty one.
def load_layout_memory(path=None):
    path = Path(path) if path is not None else LAYOUT_MEMORY_PATH
    if not path.exists():
        log.info(f"No layout memory found at '{path}', starting empty.")
        return LayoutMemory()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object in '{path}', got {type(data).__name__}")
        memory = LayoutMemory.from_dict(data)
        log.info(f"Loaded layout memory for {len(memory)} block(s) from '{path}'.")
        return memory
    except (json.JSONDecodeError, OSError, TypeError, ValueError):
        log.warning(f"Ran into an error while trying to load '{path}', starting with empty layout memory.",exc_info=True)
        return LayoutMemory()

# Writes the layout memory table, stamped with when it was saved.
def save_layout_memory(memory, path=None):
    path = Path(path) if path is not None else LAYOUT_MEMORY_PATH
    path.parent.mkdir(parents=True,exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"saved_at": now_iso(), **memory.to_dict()}, f, indent=2)
    log.info(f"Successfully saved layout memory to '{path}'")

#endregion === Saving and Loading Layout Memory ===

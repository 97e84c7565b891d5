import os


def ensure_config_path(directory="config"):
    """Create the config directory if it doesn't exist."""
    if not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)
    return directory


def get_config_path(filename="game_config.json", directory="config"):
    """Get standardized path for game configuration files."""
    directory = ensure_config_path(directory)
    if not filename.endswith(".json"):
        filename = f"{filename}.json"
    return os.path.join(directory, filename)

import os


CONFIG_DIR = os.environ.get("NAVTABS_CONFIG_DIR") or os.path.join(os.path.expanduser("~"), ".navtabs")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")

from pathlib import Path


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

# Log directory
LOG_DIR = BASE_DIR / 'logs'

# JSON document directory
LOCAL_DB_DIR = BASE_DIR / 'local_db'

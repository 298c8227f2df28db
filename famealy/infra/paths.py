from famealy.utilities.config import DATA_DIR

# Centralized location of the persisted key/value blobs (single source of truth)
STORE_DIR = DATA_DIR / 'store'

__all__ = ['DATA_DIR', 'STORE_DIR']

# Common utilities
from .config_loader import (
    load_config,
    load_monitor_settings,
    load_monitored_products,
    load_own_stores,
)
from .csv_utils import read_csv, write_csv
from .log_config import setup_logging

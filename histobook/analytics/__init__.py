"""Distribution analytics."""
from .distributor import Distributor, check_series_name, suggested_precision

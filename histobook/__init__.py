"""histobook — bucketed value distributions rendered into styled workbooks."""
from .analytics.distributor import Distributor
from .errors import HistobookError, InvalidParameterError, InvalidSeriesNameError, ValueOutOfRangeError, SinkStateError

__version__ = "1.0.0"

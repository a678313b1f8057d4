"""Tabular sinks and CSV loading."""
from .schemas import TabularSink
from .frame_sink import FrameSink

from .converter import convert, convert_word
from .realtime import create_realtime_converter

__all__ = ["convert", "convert_word", "create_realtime_converter"]

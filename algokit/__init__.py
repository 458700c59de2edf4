"""Classic algorithms: linked lists, conversions, strings, arrays, graphs and trees."""

__version__ = "0.1.0"
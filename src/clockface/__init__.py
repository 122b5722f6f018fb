"""clockface - analog clock face geometry and rendering."""

__version__ = "0.1.0"

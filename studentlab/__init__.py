"""Console programs and helpers for name lists, surveys, speakers, employees, sports and vocabulary tests."""

__version__ = "0.1.0"
"""
greeter: prompt for a name and print a greeting a given number of times.
"""

__version__ = "0.1.0"

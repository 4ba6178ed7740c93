"""A collection of miscellaneous utility functions.

Contents
--------
    `log.py`    : Console logging configuration, applied on import.
    `arrays.py` : Predicates and validation for one-dimensional sample arrays.

"""

"""
Core infrastructure: configuration, logging, metrics, errors and the
endpoint abstraction.
"""

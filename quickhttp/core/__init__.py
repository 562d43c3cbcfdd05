"""
Core Infrastructure.

Configuration, logging and the exception hierarchy shared by every layer.
"""

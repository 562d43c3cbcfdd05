"""
CLI Module.

Command-line client built with Typer and Rich.

Architecture:
- main.py holds the Typer app and global options
- commands/ holds the get and post commands
- client.py wraps httpx for the single network call

Usage:
    quickhttp --help
    quickhttp get http://httpbin.org/get
    quickhttp post http://httpbin.org/post name=alice
"""

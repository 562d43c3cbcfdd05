"""
quickhttp.

Command-line HTTP client in the httpie style.

- core/: Configuration, logging, exceptions
- schemas/: Parsed command-line items and request descriptors
- services/: Request building and response rendering
- cli/: Typer application, commands and the httpx client wrapper
"""

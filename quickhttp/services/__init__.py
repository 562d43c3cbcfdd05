"""
Services.

Request building, response projection and terminal rendering.
"""

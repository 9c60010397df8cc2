"""Folder tree building and rendering.

This package walks a directory into an in-memory tree of nodes and renders such a tree
as a box-drawing diagram similar to the Unix ``tree`` command.
"""

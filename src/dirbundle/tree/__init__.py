"""Immutable snapshot tree: files, directories, lookup, walking and extraction.

This module provides the data model of a directory snapshot along with the
pre-order walker used for glob searches and the extractor that writes a snapshot
back onto a real filesystem.
"""

"""Serialization of snapshots so they can be shipped alongside a program."""

from .json_bundle import FORMAT_NAME, FORMAT_VERSION, dump, dumps, load, load_resource, loads

__all__ = [
    "FORMAT_NAME",
    "FORMAT_VERSION",
    "dump",
    "dumps",
    "load",
    "load_resource",
    "loads",
]

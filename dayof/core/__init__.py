"""
core package
------------
Logging, exceptions, paths, validation and CLI helpers shared by the
catalog and the command line.
"""

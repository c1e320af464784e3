"""
neko: a small clone of the POSIX cat command.

The package is split into a pure line transformation pipeline
(neko.transform), a stream driver that feeds it from files or standard
input (neko.driver), and thin CLI glue (neko.cli).
"""

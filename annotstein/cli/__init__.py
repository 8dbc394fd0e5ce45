"""
Command line tools for working with COCO files.

Each submodule defines a scriptconfig based CLI that can also be called
programmatically via ``<CLI>.main(cmdline=False, **kw)``. The
:mod:`annotstein.cli.__main__` module combines them into a single modal
``annotstein`` command.
"""

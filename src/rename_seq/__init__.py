"""Sequential renaming engine.

Submodules
----------
pattern
    Rename pattern compiler.
formatter
    Renders a compiled pattern for one index.
order
    Traversal orders and size hints over the selected files.
sequencer
    Drives a file sequence through the pattern and a reaction.
rename
    Dry-run / real-run reaction performing the filesystem moves.
selection
    Explicit and glob-based file selection.
"""

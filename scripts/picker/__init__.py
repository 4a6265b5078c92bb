"""
Task Picker - Terminal User Interface for choosing a Taskfile task.

Architecture:
- providers.py: Data types and protocols (entries, keys, outcomes, surfaces)
- entry_provider.py: Loads entries from a Taskfile
- selection.py: Cyclic cursor over the entries
- loop.py: Render/poll/dispatch loop
- views/: Textual screen/widget components
- app.py: Textual application hosting the loop
- hooks.py: Terminal restoration on uncaught exceptions

Extensibility points:
1. New terminals: Implement the DisplaySurface and InputSource protocols
2. New data sources: Implement the EntryProvider protocol
3. New widgets: Create composable widgets in views/widgets.py
"""

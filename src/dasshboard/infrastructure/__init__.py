"""I/O adapters: subprocess runner, discovery, settings store, editor, templates."""

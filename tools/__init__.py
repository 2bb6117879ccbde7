"""Drop-in trash tools; each public module exports a ``TOOL`` spec."""

"""Cross-cutting pieces: settings, logging, errors and record storage."""

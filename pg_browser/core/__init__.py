"""Classification engine: filename grammar, known catalog and classifiers."""

"""Testing helpers – in-memory page sources for exercising the viewer."""

"""Application layer – pagination, filtering, sorting, projection, viewer."""

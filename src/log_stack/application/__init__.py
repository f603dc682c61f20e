"""Application layer: target ports and the dispatch use case."""

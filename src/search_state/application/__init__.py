"""Application layer – parameter normalization, facet configuration and search state."""

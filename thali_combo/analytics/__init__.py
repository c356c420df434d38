"""Menu-level statistics over a collection of thalis."""

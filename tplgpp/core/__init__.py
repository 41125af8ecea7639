"""Core types shared by the class builders: config nodes, models, errors."""

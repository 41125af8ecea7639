"""tplgpp - class schema builder for the topology pre-processor."""

__version__ = "0.1.0"

"""javadts - TypeScript ambient declarations from Java API sources."""

__version__ = "0.1.0"

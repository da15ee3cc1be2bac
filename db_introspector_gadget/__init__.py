"""db-introspector-gadget - Generate TypedDict definitions from MySQL and Postgres schemas."""

__version__ = "0.1.0"

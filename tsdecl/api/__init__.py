"""Declaration generation pipeline: extraction, type mapping, rendering."""

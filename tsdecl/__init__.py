"""Generate TypeScript type declarations from Go-style struct schemas."""

__version__ = "0.1.0"

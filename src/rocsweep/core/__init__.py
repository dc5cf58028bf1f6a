"""Core types: exceptions, enums, and value models."""

"""Configuration, constants, enums, errors and security helpers."""

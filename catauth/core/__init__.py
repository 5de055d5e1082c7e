"""Shared configuration, constants and persistence helpers."""

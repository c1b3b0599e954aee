"""Bounded contexts of FOLIO: normalization, scoring, persistence, rendering, tracking."""

"""Bounded contexts of QUILL: document, sections, scoring, export, storage, api."""

"""Campus document parsing and the shared data model."""

from campus_nav.parser.campus import load_campus, load_campus_file, parse_campus

__all__ = ["load_campus", "load_campus_file", "parse_campus"]

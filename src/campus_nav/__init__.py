"""campus-nav: road-graph routing and interactive map viewport engine for campus maps."""

__version__ = "0.3.0"

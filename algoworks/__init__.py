"""Classic algorithms and data structures: searches, sorts, heaps, hash tables, trees and graphs."""

__version__ = "0.1.0"
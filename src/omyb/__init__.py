"""OMYB (Organize My Book): numbered Markdown trees and their SUMMARY.md."""

__version__ = "0.1.0"

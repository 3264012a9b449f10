"""Command-line interface for rpkgdev"""

"""
Core functionality for the YouTube caption summarization application.

This package contains modules for fetching watch pages, extracting
captions, and summarizing transcripts.
"""

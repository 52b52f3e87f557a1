#!/usr/bin/env python3
"""
Main CLI for Font Manifest
==========================

Entry point for querying a font configuration manifest from the command line.
"""

from fontmanifest.cli import cli

if __name__ == "__main__":
    cli()

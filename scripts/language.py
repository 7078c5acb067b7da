#!/usr/bin/env python3
"""Identify the language of a sample sentence. Usage: language.py <user_key>"""

from __future__ import annotations

import sys

from rosette_api.cli import _main

if __name__ == "__main__":
    raise SystemExit(_main(["language", *sys.argv[1:]]))
